from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from app.core.database import Base
import bcrypt

# Comptes utilisateurs: table réservée pour une future authentification,
# aucune route ne l'utilise pour l'instant
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    def set_password(self, password: str):
        self.password_hash = bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()

    def verify_password(self, password: str) -> bool:
        return bcrypt.checkpw(password.encode(), self.password_hash.encode())
