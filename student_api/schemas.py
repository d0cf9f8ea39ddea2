# schemas.py

from pydantic import BaseModel, Field

# Pydantic models for request and response

class StudentCreate(BaseModel):
    # Fields that client sends to POST /student
    NAME: str = Field(..., examples=["Chiranjeevi"])
    TITLE: str = Field(..., examples=["Gorantla"])
    CLASS: str = Field(..., examples=["V"])
    SECTION: str = Field(..., examples=["C"])
    ROLLID: int = Field(..., examples=[47])

class StudentTitleUpdate(BaseModel):
    # PUT /student only touches TITLE and SECTION
    TITLE: str = Field(..., examples=["Chiran"])
    SECTION: str = Field(..., examples=["A"])
    ROLLID: int = Field(..., examples=[47])

class StudentClassUpdate(BaseModel):
    # PATCH /student only touches CLASS and SECTION
    CLASS: str = Field(..., examples=["X"])
    SECTION: str = Field(..., examples=["D"])
    ROLLID: int = Field(..., examples=[47])

class WriteResult(BaseModel):
    # Fields that appear in the response body of a write
    affectedRows: int = Field(..., examples=[1])
    insertId: int = Field(..., examples=[0])
    warningStatus: int = Field(..., examples=[0])

class ErrorResponse(BaseModel):
    detail: str = Field(..., examples=["Internal Server Error."])
