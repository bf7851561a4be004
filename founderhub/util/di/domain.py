"""Domain layer DI providers."""

from dishka import Scope, provide

from founderhub.domain.repository import CommentRepository, ProfileRepository
from founderhub.domain.service import CommentService
from founderhub.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        profile_repository: ProfileRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            profile_repository=profile_repository,
        )
