"""Database base class and model imports."""
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import all models here so metadata.create_all sees them
from app.db.models.user import User  # noqa: F401, E402
from app.db.models.lecture import Lecture  # noqa: F401, E402
from app.db.models.invitation import Invitation  # noqa: F401, E402
from app.db.models.attendance import Attendance  # noqa: F401, E402
from app.db.models.feedback import Feedback  # noqa: F401, E402
from app.db.models.discussion import Discussion  # noqa: F401, E402
