# /attenote/routers/maintenance_router.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..db.database import get_db
from ..models import delete_model
from ..models.repository_result import RepositoryError
from ..services import delete_service
from ..services.media_cleaner import get_media_root

router = APIRouter()

@router.post(
    "/orphan-sweep",
    response_model=delete_model.OrphanSweepReport,
    summary="Sweep Orphaned Note Media",
    description="Deletes media files that no note media row references. Intended for an external periodic scheduler."
)
def run_orphan_sweep(db: Session = Depends(get_db), media_root: str = Depends(get_media_root)):
    """
    Endpoint to trigger one orphan media sweep over the configured media root.
    """
    result = delete_service.sweep_orphaned_media(db=db, media_root=media_root)
    if isinstance(result, RepositoryError):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while sweeping orphaned media."
        )
    return result.data
