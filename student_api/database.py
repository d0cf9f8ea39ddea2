# database.py

from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.pool import QueuePool

from student_api.logger import log_info


# Create the process-wide engine; its QueuePool hands out and takes back connections
def create_db_engine(db_file: str, pool_size: int = 5) -> Engine:
    """ Create an engine with a connection pool for the SQLite database specified by db_file. """
    engine = create_engine(
        f"sqlite:///{db_file}",
        # pooled connections are handed between worker threads, never shared by two at once
        connect_args={"check_same_thread": False},
        poolclass=QueuePool,
        pool_size=pool_size,
        pool_pre_ping=True,
    )
    log_info(f"Connection pool ready for database: {db_file} (size {pool_size})")
    return engine


@contextmanager
def get_connection(engine: Engine):
    """
    Check a connection out of the pool for the duration of the block.

    The connection goes back to the pool on exit; if the block raised, it is
    invalidated first so the underlying connection is closed instead of reused.
    """
    conn = engine.connect()
    try:
        yield conn
    except Exception:
        conn.invalidate()
        raise
    finally:
        conn.close()


# Create tables if they don't exist
def create_tables(conn: Connection):
    """ Create the student, orders, listofitem, agents and company tables. """
    conn.exec_driver_sql(
        """
        CREATE TABLE IF NOT EXISTS student (
            NAME TEXT,
            TITLE TEXT,
            CLASS TEXT,
            SECTION TEXT,
            ROLLID INTEGER UNIQUE
        )
        """
    )

    conn.exec_driver_sql(
        """
        CREATE TABLE IF NOT EXISTS orders (
            ORD_NUM INTEGER PRIMARY KEY NOT NULL,
            ORD_AMOUNT REAL NOT NULL,
            ADVANCE_AMOUNT REAL NOT NULL,
            ORD_DATE DATE NOT NULL,
            CUST_CODE TEXT NOT NULL,
            AGENT_CODE TEXT NOT NULL,
            ORD_DESCRIPTION TEXT NOT NULL
        )
        """
    )

    conn.exec_driver_sql(
        """
        CREATE TABLE IF NOT EXISTS listofitem (
            ITEMCODE TEXT NOT NULL,
            ITEMNAME TEXT NOT NULL,
            BATCHCODE TEXT NOT NULL,
            CONAME TEXT
        )
        """
    )

    conn.exec_driver_sql(
        """
        CREATE TABLE IF NOT EXISTS agents (
            AGENT_CODE TEXT PRIMARY KEY NOT NULL,
            AGENT_NAME TEXT,
            WORKING_AREA TEXT,
            COMMISSION REAL,
            PHONE_NO TEXT,
            COUNTRY TEXT
        )
        """
    )

    conn.exec_driver_sql(
        """
        CREATE TABLE IF NOT EXISTS company (
            COMPANY_ID TEXT PRIMARY KEY NOT NULL,
            COMPANY_NAME TEXT,
            COMPANY_CITY TEXT
        )
        """
    )
    conn.commit()
    log_info("Tables created successfully.")


# Run a single parameterized statement and shape the result like the driver reports it
def execute(conn: Connection, statement: str, params: tuple = ()):
    """
    Execute one statement with positional bindings.

    A query returns its rows as a list of column -> value dicts. Anything
    else is committed and returns the affected-rows packet.
    """
    result = conn.exec_driver_sql(statement, params)
    if result.returns_rows:
        return [dict(row) for row in result.mappings()]
    conn.commit()
    # the driver's lastrowid belongs to the connection, so it is stale for anything but an INSERT
    inserted = statement.lstrip().upper().startswith("INSERT") and result.rowcount > 0
    return {
        "affectedRows": result.rowcount,
        "insertId": result.lastrowid if inserted else 0,
        "warningStatus": 0,
    }


# Insert a student record
def insert_student(name: str, title: str, class_: str, section: str, roll_id: int, conn: Connection):
    return execute(
        conn,
        "INSERT INTO student (NAME, TITLE, CLASS, SECTION, ROLLID) VALUES (?, ?, ?, ?, ?)",
        (name, title, class_, section, roll_id),
    )

# Retrieve every student
def get_students(conn: Connection):
    return execute(conn, "SELECT * FROM student")

# Update title and section of the student with roll_id
def update_student_title(title: str, section: str, roll_id: int, conn: Connection):
    return execute(
        conn,
        "UPDATE student SET TITLE = ?, SECTION = ? WHERE ROLLID = ?",
        (title, section, roll_id),
    )

# Update class and section of the student with roll_id
def update_student_class(class_: str, section: str, roll_id: int, conn: Connection):
    return execute(
        conn,
        "UPDATE student SET CLASS = ?, SECTION = ? WHERE ROLLID = ?",
        (class_, section, roll_id),
    )

def delete_student(roll_id: int, conn: Connection):
    return execute(conn, "DELETE FROM student WHERE ROLLID = ?", (roll_id,))

def get_orders(conn: Connection):
    return execute(conn, "SELECT * FROM orders")

def get_list_of_items(item_code: str, conn: Connection):
    return execute(conn, "SELECT * FROM listofitem WHERE ITEMCODE = ?", (item_code,))

def get_agents_by_area(working_area: str, conn: Connection):
    return execute(conn, "SELECT * FROM agents WHERE WORKING_AREA = ?", (working_area,))

def get_companies_by_name(company_name: str, conn: Connection):
    return execute(conn, "SELECT * FROM company WHERE COMPANY_NAME = ?", (company_name,))
