from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    pass

# Import models so metadata.create_all sees every table
from hr_portal.models import *  # noqa
