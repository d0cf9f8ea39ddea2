# main.py

import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, HTTPException, Query
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from student_api import database
from student_api.config import settings
from student_api.database import create_db_engine, get_connection, create_tables
from student_api.logger import configure_logging, log_info, log_error
from student_api.schemas import StudentCreate, StudentTitleUpdate, StudentClassUpdate, WriteResult, ErrorResponse


configure_logging(settings.log_level)

ERROR_RESPONSES = {500: {"model": ErrorResponse, "description": "Database error"}}


# Create the engine (and its connection pool) and tables on startup, dispose of it on shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Set up the pooled database engine and create tables on startup.
    Dispose of the engine and its pooled connections on shutdown.
    """
    engine = create_db_engine(settings.database_file, pool_size=settings.pool_size)
    with get_connection(engine) as conn:
        create_tables(conn=conn)
    # every handler reaches the pool through app state
    app.state.db_engine = engine
    log_info("Starting up the Student Records API...")

    yield
    log_info("Shutting down the Student Records API...")
    app.state.db_engine = None
    engine.dispose()
    log_info("Database connection pool disposed.")


app = FastAPI(
    title="Student Records API",
    description="REST access to the student, orders, listofitem, agents and company tables.",
    version="1.0.0",
    docs_url="/api-docs",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Set up a middleware to generate request_id for each request and log it
@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """
    Reuse the Request-ID header if the client sent one, otherwise generate one.
    """
    request_id = request.headers.get("Request-ID")
    if not request_id:
        request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    log_info(f"Received request: {request.method} {request.url}", request_id=request_id)

    response = await call_next(request)
    # add the request_id to the response headers for tracking
    response.headers["Request-ID"] = request_id
    log_info(f"Completed request: {request.method} {request.url} with status {response.status_code}", request_id=request_id)
    return response


def run_statement(request: Request, statement, **params) -> JSONResponse:
    """
    Acquire a pooled connection, run one statement on it and answer with its result.

    On success the connection goes back to the pool; if the statement fails the
    connection is invalidated so the pool closes it instead of handing it out again.
    Either failure is answered with a 500.
    """
    request_id = request.state.request_id
    engine = request.app.state.db_engine
    try:
        conn = engine.connect()
    except Exception as e:
        log_error(f"Error acquiring database connection: {e}", request_id=request_id)
        raise HTTPException(status_code=500, detail="Could not acquire database connection.")

    try:
        result = statement(conn=conn, **params)
    except Exception as e:
        conn.invalidate()
        conn.close()
        log_error(f"Error executing {statement.__name__}: {e}", request_id=request_id)
        raise HTTPException(status_code=500, detail="Internal Server Error.")

    conn.close()
    return JSONResponse(content=jsonable_encoder(result), status_code=200)


# API: /student - POST to insert a student
@app.post("/student", tags=["student"], response_model=WriteResult, responses=ERROR_RESPONSES)
def create_student(request: Request, student: StudentCreate):
    """
    Insert a student.
    """
    return run_statement(
        request,
        database.insert_student,
        name=student.NAME,
        title=student.TITLE,
        class_=student.CLASS,
        section=student.SECTION,
        roll_id=student.ROLLID,
    )

# API: /student - GET to list every student
@app.get("/student", tags=["student"], responses=ERROR_RESPONSES)
def read_students(request: Request):
    """
    Returns the list of all the students.
    """
    return run_statement(request, database.get_students)

# API: /student - PUT to change title and section
@app.put("/student", tags=["student"], response_model=WriteResult, responses=ERROR_RESPONSES)
def update_student_title(request: Request, student: StudentTitleUpdate):
    """
    Update TITLE and SECTION of the student with the given ROLLID.
    """
    return run_statement(
        request,
        database.update_student_title,
        title=student.TITLE,
        section=student.SECTION,
        roll_id=student.ROLLID,
    )

# API: /student - PATCH to change class and section
@app.patch("/student", tags=["student"], response_model=WriteResult, responses=ERROR_RESPONSES)
def update_student_class(request: Request, student: StudentClassUpdate):
    """
    Update CLASS and SECTION of the student with the given ROLLID.
    """
    return run_statement(
        request,
        database.update_student_class,
        class_=student.CLASS,
        section=student.SECTION,
        roll_id=student.ROLLID,
    )

# API: /student/{roll_id} - DELETE a student
@app.delete("/student/{roll_id}", tags=["student"], response_model=WriteResult, responses=ERROR_RESPONSES)
def delete_student(request: Request, roll_id: int):
    """
    Deletes a student with specified id.
    """
    return run_statement(request, database.delete_student, roll_id=roll_id)

@app.get("/orders", tags=["orders"], responses=ERROR_RESPONSES)
def read_orders(request: Request):
    return run_statement(request, database.get_orders)

@app.get("/listofitem/{item_code}", tags=["listofitem"], responses=ERROR_RESPONSES)
def read_list_of_items(request: Request, item_code: str):
    return run_statement(request, database.get_list_of_items, item_code=item_code)

@app.get("/agents", tags=["agents"], responses=ERROR_RESPONSES)
def read_agents(request: Request, city: str = Query(..., examples=["London"])):
    """
    Agents whose WORKING_AREA equals city.
    """
    return run_statement(request, database.get_agents_by_area, working_area=city)

@app.get("/company", tags=["company"], responses=ERROR_RESPONSES)
def read_companies(request: Request, name: str = Query(..., examples=["Acme"])):
    """
    Companies whose COMPANY_NAME equals name.
    """
    return run_statement(request, database.get_companies_by_name, company_name=name)

@app.get("/health", tags=["health"])
def health_check():
    return {"status": "healthy"}
