# /app/routers/classes_router.py

from fastapi import APIRouter, Depends, status
from fastapi.responses import StreamingResponse

from ..models import class_model, common_model, student_model
from ..services import class_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

# --- CLASS COLLECTION ENDPOINTS (/api/classes) ---

@router.get("", response_model=class_model.ClassListResponse, summary="Get All Classes")
def get_all_classes(db: DatabaseService = Depends(get_db_service)):
    return class_service.list_classes(db=db)

@router.post("", response_model=class_model.Class, status_code=status.HTTP_201_CREATED, summary="Create a New Class")
def create_new_class(class_create: class_model.ClassCreate, db: DatabaseService = Depends(get_db_service)):
    return class_service.create_class(class_data=class_create, db=db)

# --- INDIVIDUAL CLASS RESOURCE ENDPOINTS (/api/classes/{class_id}) ---

@router.get("/{class_id}", response_model=class_model.Class, summary="Get a Single Class")
def get_class_by_id(class_id: str, db: DatabaseService = Depends(get_db_service)):
    return class_service.get_class(class_id=class_id, db=db)

@router.delete("/{class_id}", response_model=common_model.MessageResponse, summary="Delete a Class")
def delete_class(class_id: str, db: DatabaseService = Depends(get_db_service)):
    return class_service.delete_class(class_id=class_id, db=db)

# --- STUDENT SUB-RESOURCE ENDPOINTS ---

@router.get("/{class_id}/students", response_model=student_model.StudentListResponse, summary="Get the Roster of a Class")
def get_class_students(class_id: str, db: DatabaseService = Depends(get_db_service)):
    return class_service.get_class_roster(class_id=class_id, db=db)

@router.get("/{class_id}/students/export", summary="Export Class Roster as CSV", response_class=StreamingResponse)
def export_class_roster_csv(class_id: str, db: DatabaseService = Depends(get_db_service)):
    csv_string = class_service.export_roster_as_csv(class_id=class_id, db=db)
    file_name = f"roster_{class_id}.csv"
    return StreamingResponse(
        iter([csv_string]),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={file_name}"}
    )
