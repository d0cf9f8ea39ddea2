# __main__.py

import uvicorn

from student_api.config import settings


if __name__ == "__main__":
    uvicorn.run("student_api.main:app", host=settings.host, port=settings.port)
