# /attenote/routers/students_router.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..db.database import get_db
from ..models import delete_model
from ..models.repository_result import RepositoryError
from ..services import delete_service

router = APIRouter()

@router.delete(
    "/{student_id}",
    response_model=delete_model.StudentCascadeDeleteResult,
    summary="Permanently Delete a Student",
    description="Deletes the student and its attendance records. Attendance sessions are kept.",
    responses={404: {"description": "Student not found"}}
)
def delete_student(student_id: int, db: Session = Depends(get_db)):
    result = delete_service.delete_student_permanently(db=db, student_id=student_id)
    if isinstance(result, RepositoryError):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while deleting the student."
        )
    if not result.data.student_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return result.data
