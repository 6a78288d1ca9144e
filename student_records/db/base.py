# Registers every model on the same metadata
from student_records.db.base_class import Base # noqa
from student_records.models.student import StudentProfile # noqa

# side-effect imports (do not remove)
from student_records.models.user import User # noqa
