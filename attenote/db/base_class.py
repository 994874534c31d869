# /attenote/db/base_class.py

from sqlalchemy.orm import declarative_base, declared_attr


class CustomBase:
    """
    Shared declarative base. Tables default to the lowercase class name
    plus an "s"; models with irregular plurals set `__tablename__` themselves.
    """

    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower() + "s"


Base = declarative_base(cls=CustomBase)
