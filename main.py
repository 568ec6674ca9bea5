import logging
from fastapi import FastAPI, responses
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from fastapi import exceptions as exc
from sqlalchemy.exc import IntegrityError, DBAPIError
from api.v1.router import auth, contact
from core.setup import Base, database
import handler as hlp
from config.setting import settings
from error import ServerError
import model.contact  # noqa: F401  registers the table on Base

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create database tables
Base.metadata.create_all(bind=database.get_engine)

app = FastAPI(
    title=settings.APP_TITLE, version="1.0.0", description="Contact form and admin inbox"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)


app.add_exception_handler(ValidationError, hlp.validation_error_handler)
app.add_exception_handler(RequestValidationError, hlp.validation_error_handler)
app.add_exception_handler(exc.HTTPException, hlp.validation_http_exceptions_handler)
app.add_exception_handler(IntegrityError, hlp.db_error_handler)
app.add_exception_handler(DBAPIError, hlp.db_error_handler)
app.add_exception_handler(ServerError, hlp.server_error_handler)


app.include_router(auth.router, prefix=settings.API_PREFIX)
# Public contact routes first so /contact/statuses is not read as an id
app.include_router(contact.router, prefix=settings.API_PREFIX)
app.include_router(contact.admin_router, prefix=settings.API_PREFIX)


@app.get("/", include_in_schema=False)
def redirect_to_docs():
    return responses.RedirectResponse("/docs")
