# seed.py

"""
Sample rows for the read-only tables (orders, listofitem, agents, company).
Run with: python -m student_api.seed
"""
from sqlalchemy.engine import Connection

from student_api.config import settings
from student_api.database import create_db_engine, get_connection, create_tables
from student_api.logger import configure_logging, log_info


AGENTS = [
    ("A007", "Ramasundar", "Bangalore", 0.15, "077-25814763", ""),
    ("A003", "Alex", "London", 0.13, "075-12458969", ""),
    ("A008", "Alford", "New York", 0.12, "044-25874365", ""),
    ("A011", "Ravi Kumar", "Bangalore", 0.15, "077-45625874", ""),
    ("A006", "McDen", "London", 0.15, "078-23412356", ""),
    ("A004", "Ivan", "Torento", 0.15, "008-22544166", ""),
]

COMPANIES = [
    ("18", "Order All", "Boston"),
    ("15", "Jack Hill Ltd", "London"),
    ("16", "Akas Foods", "Delhi"),
    ("17", "Foodies.", "London"),
    ("19", "sip-n-Bite.", "New York"),
    ("20", "Acme", "Chicago"),
]

ITEMS = [
    ("I001", "Cheez-It", "B1000", "Acme"),
    ("I002", "BN Biscuit", "B1001", "Foodies."),
    ("I003", "Mighty Munch", "B1002", "Jack Hill Ltd"),
    ("I004", "Pot Rice", "B1002", "Foodies."),
    ("I005", "Jaffa Cakes", "B1003", "Order All"),
]

ORDERS = [
    (200100, 1000.00, 600.00, "2008-08-01", "C00013", "A003", "SOD"),
    (200110, 3000.00, 500.00, "2008-04-15", "C00019", "A007", "SOD"),
    (200107, 4500.00, 900.00, "2008-08-30", "C00007", "A011", "SOD"),
    (200112, 2000.00, 400.00, "2008-05-30", "C00016", "A006", "SOD"),
    (200113, 4000.00, 600.00, "2008-06-10", "C00022", "A004", "SOD"),
]


def seed_database(conn: Connection):
    """ Replace the contents of the read-only tables with the sample rows. """
    for table in ("orders", "listofitem", "agents", "company"):
        conn.exec_driver_sql(f"DELETE FROM {table}")

    conn.exec_driver_sql(
        "INSERT INTO agents (AGENT_CODE, AGENT_NAME, WORKING_AREA, COMMISSION, PHONE_NO, COUNTRY) VALUES (?, ?, ?, ?, ?, ?)",
        AGENTS,
    )
    conn.exec_driver_sql(
        "INSERT INTO company (COMPANY_ID, COMPANY_NAME, COMPANY_CITY) VALUES (?, ?, ?)",
        COMPANIES,
    )
    conn.exec_driver_sql(
        "INSERT INTO listofitem (ITEMCODE, ITEMNAME, BATCHCODE, CONAME) VALUES (?, ?, ?, ?)",
        ITEMS,
    )
    conn.exec_driver_sql(
        """
        INSERT INTO orders (ORD_NUM, ORD_AMOUNT, ADVANCE_AMOUNT, ORD_DATE, CUST_CODE, AGENT_CODE, ORD_DESCRIPTION)
        VALUES (?, ?, ?, ?, ?, ?, ?)
        """,
        ORDERS,
    )
    conn.commit()
    log_info(
        f"Seeded {len(ORDERS)} orders, {len(ITEMS)} items, {len(AGENTS)} agents, {len(COMPANIES)} companies."
    )


if __name__ == "__main__":
    configure_logging(settings.log_level)
    engine = create_db_engine(settings.database_file, pool_size=1)
    with get_connection(engine) as conn:
        create_tables(conn=conn)
        seed_database(conn=conn)
    engine.dispose()
