"""Project store gateway: create, read and update projects by public id."""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from schema_designer.core.errors import NotFound, StoreUnavailable, WriteError
from schema_designer.models.database import Project
from schema_designer.models.database.project import new_project_id, utcnow
from schema_designer.models.schemas import ProjectCreate, ProjectResponse, ProjectUpdate

logger = logging.getLogger(__name__)


class ProjectStore:
    """CRUD facade over the projects table.

    No delete operation exists. Update only writes the name, the schema and
    the update timestamp; the schema type and conversation stay as they were
    at creation.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: ProjectCreate) -> str:
        """
        Insert a new project.

        Returns:
            The freshly minted public id

        Raises:
            WriteError: if the insert is rejected
        """
        now = utcnow()
        project = Project(
            id=new_project_id(),
            name=data.name,
            db_schema=data.db_schema,
            schema_type=data.schema_type,
            conversation=[turn.model_dump(mode="json") for turn in data.conversation],
            created_at=now,
            updated_at=now,
        )
        self.db.add(project)

        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.error("Project id collision on insert: %s", e)
            raise WriteError("Failed to create project") from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Database error on insert: %s", e)
            raise WriteError("Failed to create project") from e

        logger.info("Created project %s", project.id)
        return project.id

    async def read(self, project_id: str) -> ProjectResponse:
        """
        Fetch a project by its public id.

        Raises:
            NotFound: if no project has this id
        """
        try:
            result = await self.db.execute(select(Project).where(Project.id == project_id))
            project = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error on read: %s", e)
            raise StoreUnavailable("Failed to fetch project") from e

        if project is None:
            raise NotFound()

        return ProjectResponse.from_record(project)

    async def update(self, project_id: str, data: ProjectUpdate) -> None:
        """
        Replace name and schema and refresh the update timestamp.

        Raises:
            NotFound: if no project has this id (nothing is created)
            WriteError: if the update is rejected
        """
        stmt = (
            update(Project)
            .where(Project.id == project_id)
            .values(name=data.name, db_schema=data.db_schema, updated_at=utcnow())
        )

        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Database error on update: %s", e)
            raise WriteError("Failed to update project") from e

        if result.rowcount == 0:
            raise NotFound()

        logger.info("Updated project %s", project_id)
