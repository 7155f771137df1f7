from .base import Base
from .guru import GuruModel
from .jurnal import JurnalModel
from .siswa import SiswaModel
from .user import UserModel

__all__ = ["Base", "GuruModel", "JurnalModel", "SiswaModel", "UserModel"]
