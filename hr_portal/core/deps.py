from fastapi import Depends
from sqlalchemy.orm import Session

from hr_portal.core.directory import Directory
from hr_portal.core.ratings import RatingBook
from hr_portal.core.vacation_workflow import VacationWorkflow
from hr_portal.db.session import get_db


def get_directory(db: Session = Depends(get_db)) -> Directory:
    return Directory(db)


def get_workflow(
    db: Session = Depends(get_db),
    directory: Directory = Depends(get_directory),
) -> VacationWorkflow:
    return VacationWorkflow(db, directory)


def get_rating_book(
    db: Session = Depends(get_db),
    directory: Directory = Depends(get_directory),
) -> RatingBook:
    return RatingBook(db, directory)
