import uuid as uuid_pkg
from typing import Optional

from sqlalchemy import Column, ForeignKey, UniqueConstraint, text
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlmodel import Field, Relationship, SQLModel

from app.models.base import TimestampMixin, UUIDMixin


class DashboardCreate(SQLModel):
    """Schema for creating a dashboard.

    Fields are optional here so that a missing name is reported as a 400
    with a readable message instead of a schema validation error.
    """

    name: str | None = None
    repositories: list[str] | None = None


class DashboardUpdate(SQLModel):
    """Schema for a partial dashboard update.

    ``repositories``, when present, replaces the whole repository set.
    """

    name: str | None = None
    repositories: list[str] | None = None


class Dashboard(UUIDMixin, TimestampMixin, table=True):
    """A named, owner-scoped group of GitHub repositories."""

    __tablename__ = "dashboards"

    name: str = Field(max_length=255, nullable=False)
    github_username: str = Field(max_length=255, nullable=False, index=True)

    repositories: list["DashboardRepository"] = Relationship(
        back_populates="dashboard",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "order_by": "DashboardRepository.position",
            "lazy": "selectin",
        },
    )

    @property
    def repo_full_names(self) -> list[str]:
        return [r.repo_full_name for r in self.repositories]


class DashboardRepository(SQLModel, table=True):
    """A repository (``owner/name``) that belongs to a dashboard."""

    __tablename__ = "dashboard_repositories"
    __table_args__ = (
        UniqueConstraint("dashboard_id", "repo_full_name", name="dashboard_repo_unique_idx"),
    )

    id: uuid_pkg.UUID = Field(
        default_factory=uuid_pkg.uuid4,
        primary_key=True,
        nullable=False,
        sa_column_kwargs={"server_default": text("gen_random_uuid()")},
    )
    dashboard_id: uuid_pkg.UUID = Field(
        sa_column=Column(
            PG_UUID(as_uuid=True),
            ForeignKey("dashboards.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
    )
    repo_full_name: str = Field(max_length=255, nullable=False)
    # Index in the list the owner submitted; keeps dashboard order stable
    position: int = Field(default=0, nullable=False)

    dashboard: Optional["Dashboard"] = Relationship(back_populates="repositories")
