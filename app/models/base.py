from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Declarative base for the ORM models.

    Models inheriting from it are registered in `Base.metadata` and
    created by `init_db` on startup.
    """
    pass
