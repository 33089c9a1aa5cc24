# backend/app/db/models/image_model.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime
from sqlalchemy.sql import func

from app.db.database import Base


class UploadedImage(Base):
    __tablename__ = "uploaded_images"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    original_name = Column(String(255), nullable=False)
    url = Column(Text, nullable=False)  # data URL en base64
    original_width = Column(Integer, nullable=False)
    original_height = Column(Integer, nullable=False)
    resized_width = Column(Integer, nullable=False)
    resized_height = Column(Integer, nullable=False)
    file_size = Column(Integer, nullable=True)
    mime_type = Column(String(100), nullable=True)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
