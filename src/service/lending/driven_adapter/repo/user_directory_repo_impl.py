from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.lending.app.interface.i_user_directory_repo import IUserDirectoryRepo
from src.service.lending.domain.entity.user_entity import UserEntity
from src.service.lending.driven_adapter.model import UserModel


class UserDirectoryRepoImpl(IUserDirectoryRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def get_user_entity(self, *, user_id: int) -> UserEntity:
        db_user = await self.session.get(UserModel, user_id)
        if not db_user:
            raise NotFoundError('User not found', user_id=user_id)
        return UserEntity(id=db_user.id, name=db_user.name, email=db_user.email)
