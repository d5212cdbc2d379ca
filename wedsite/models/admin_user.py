"""Admin accounts: platform admins manage everything, template admins one template."""

import enum
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String

from wedsite.database import Base


class AdminRole(str, enum.Enum):
    platform_admin = "platform_admin"
    template_admin = "template_admin"


class AdminUser(Base):
    __tablename__ = "admin_users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    hashed_password = Column(String(255), nullable=False)
    role = Column(String(30), nullable=False, default=AdminRole.template_admin.value)
    template_id = Column(String(36), ForeignKey("templates.id", ondelete="CASCADE"), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    @property
    def is_platform_admin(self) -> bool:
        return self.role == AdminRole.platform_admin.value

    def can_manage(self, template_id: str) -> bool:
        return self.is_platform_admin or self.template_id == template_id
