# backend/app/schemas/user_schema.py
"""
Esquemas Pydantic para usuarios y autenticación.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, ConfigDict


class UserCredentials(BaseModel):
    """Email y contraseña, usados tanto en el registro como en el inicio de sesión."""
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)


class UserCreate(UserCredentials):
    """Registro de un nuevo usuario."""
    password: str = Field(..., min_length=6, max_length=72)


class AdminSetup(BaseModel):
    """Alta del administrador inicial. Sin datos se usan los valores de configuración."""
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6, max_length=72)


class UserResponse(BaseModel):
    """Objeto de usuario que el cliente conserva tras iniciar sesión."""
    id: int
    email: EmailStr
    is_admin: bool = False
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
