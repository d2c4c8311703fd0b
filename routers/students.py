import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from database import get_db
from models.students import Student
from schemas.students import StudentOut, StudentStatusUpdate, StudentUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/students", tags=["Students"])


def _get_student_or_404(db: Session, student_id: int) -> Student:
    student = db.query(Student).options(
        joinedload(Student.admission)
    ).filter(Student.id == student_id).first()
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return student


def _save(db: Session, student: Student, action: str) -> Student:
    try:
        db.commit()
        db.refresh(student)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[students] %s failed for student %s", action, student.id)
        raise HTTPException(status_code=500, detail=f"Failed to {action}")
    return student


@router.get("")
def list_students(include_inactive: bool = False, db: Session = Depends(get_db)):
    query = db.query(Student).options(joinedload(Student.admission))
    if not include_inactive:
        query = query.filter(Student.is_active == True)

    students = query.order_by(Student.created_at.desc(), Student.id.desc()).all()
    return {"success": True, "data": [StudentOut.model_validate(s) for s in students]}


@router.get("/{student_id}")
def get_student(student_id: int, db: Session = Depends(get_db)):
    student = _get_student_or_404(db, student_id)
    return {"success": True, "data": StudentOut.model_validate(student)}


@router.put("/{student_id}")
def update_student(student_id: int, data: StudentUpdate, db: Session = Depends(get_db)):
    student = _get_student_or_404(db, student_id)

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(student, field, value)

    student = _save(db, student, "update student")
    return {"success": True, "data": StudentOut.model_validate(student)}


@router.patch("/{student_id}/status")
def set_student_status(student_id: int, data: StudentStatusUpdate, db: Session = Depends(get_db)):
    student = _get_student_or_404(db, student_id)
    student.is_active = data.is_active

    student = _save(db, student, "update student status")
    return {"success": True, "data": StudentOut.model_validate(student)}
