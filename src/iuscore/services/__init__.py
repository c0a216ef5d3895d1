from iuscore.services.exam_loader import ExamFile, load_exam, parse_exam
from iuscore.services.exam_session import ExamSession

__all__ = ["ExamFile", "ExamSession", "load_exam", "parse_exam"]
