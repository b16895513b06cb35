from fastapi import APIRouter, Depends, Query, status

from ..authz import authenticate, authorize_admin
from ..dependencies import get_student_repo
from ..schemas import Envelope, StudentIn, StudentOut
from ....application.dto import StudentFilters
from ....application.use_cases.manage_students import (
    CreateStudent,
    DeleteStudent,
    IStudentRepository,
    PatchStudent,
    ReplaceStudent,
)
from ....domain.entities import Student

router = APIRouter(prefix="/students", tags=["students"])

ENVELOPE_OPTS = {"response_model_exclude_none": True}


def _out(student: Student) -> StudentOut:
    return StudentOut.model_validate(student)


def _many(rows: list[Student]) -> Envelope[list[StudentOut]]:
    return Envelope[list[StudentOut]](count=len(rows), data=[_out(r) for r in rows])


@router.get("", response_model=Envelope[list[StudentOut]], **ENVELOPE_OPTS)
async def list_students(repo: IStudentRepository = Depends(get_student_repo)):
    return _many(repo.list_all())


# declared before /{student_id} so "search" is never taken for an id
@router.get("/search", response_model=Envelope[list[StudentOut]], **ENVELOPE_OPTS)
async def search_students(
    name: str | None = Query(None),
    course: str | None = Query(None),
    grade: str | None = Query(None),
    repo: IStudentRepository = Depends(get_student_repo),
):
    return _many(repo.search(StudentFilters(name=name, course=course, grade=grade)))


@router.get("/{student_id}", response_model=Envelope[StudentOut], **ENVELOPE_OPTS)
async def get_student(student_id: int, repo: IStudentRepository = Depends(get_student_repo)):
    return Envelope[StudentOut](data=_out(repo.find_by_id(student_id)))


# --- Write endpoints:

@router.post("", response_model=Envelope[StudentOut], status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(authenticate)], **ENVELOPE_OPTS)
async def create_student(
    payload: StudentIn | None = None,
    repo: IStudentRepository = Depends(get_student_repo),
):
    payload = payload or StudentIn()
    student = CreateStudent(repo).execute(payload.to_fields())
    return Envelope[StudentOut](message="Student created successfully", data=_out(student))


@router.put("/{student_id}", response_model=Envelope[StudentOut],
            dependencies=[Depends(authorize_admin)], **ENVELOPE_OPTS)
async def replace_student(
    student_id: int,
    payload: StudentIn | None = None,
    repo: IStudentRepository = Depends(get_student_repo),
):
    payload = payload or StudentIn()
    student = ReplaceStudent(repo).execute(student_id, payload.to_fields())
    return Envelope[StudentOut](message="Student updated successfully", data=_out(student))


@router.patch("/{student_id}", response_model=Envelope[StudentOut],
              dependencies=[Depends(authorize_admin)], **ENVELOPE_OPTS)
async def patch_student(
    student_id: int,
    payload: StudentIn | None = None,
    repo: IStudentRepository = Depends(get_student_repo),
):
    payload = payload or StudentIn()
    student = PatchStudent(repo).execute(student_id, payload.to_fields())
    return Envelope[StudentOut](message="Student updated successfully", data=_out(student))


@router.delete("/{student_id}", response_model=Envelope[StudentOut],
               dependencies=[Depends(authorize_admin)], **ENVELOPE_OPTS)
async def delete_student(student_id: int, repo: IStudentRepository = Depends(get_student_repo)):
    student = DeleteStudent(repo).execute(student_id)
    return Envelope[StudentOut](message="Student deleted successfully", data=_out(student))
