from abc import ABC, abstractmethod

from src.service.lending.domain.entity.user_entity import UserEntity


class IUserDirectoryRepo(ABC):
    """Read-only access to registered users"""

    @abstractmethod
    async def get_user_entity(self, *, user_id: int) -> UserEntity:
        """
        Get user by ID

        Raises:
            NotFoundError: If no user has this ID
        """
        pass
