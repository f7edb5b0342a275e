"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations on top of one
persistence gateway and one file storage.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from shared.gateway import IPersistenceGateway
    from shared.storage import IFileStorage
    from modules.auth.interfaces import IAuthService
    from modules.auth.session import SessionCodec
    from modules.scheduling.interfaces import ISchedulingService
    from modules.content.interfaces import IContentService
    from modules.notifications.interfaces import INotificationService
    from modules.admin.interfaces import IAdminService
    from modules.plans.interfaces import IPlanService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._gateway: "IPersistenceGateway | None" = None
        self._storage: "IFileStorage | None" = None
        self._codec: "SessionCodec | None" = None
        self._auth_service: "IAuthService | None" = None
        self._scheduling_service: "ISchedulingService | None" = None
        self._content_service: "IContentService | None" = None
        self._notification_service: "INotificationService | None" = None
        self._admin_service: "IAdminService | None" = None
        self._plan_service: "IPlanService | None" = None

    @property
    def gateway(self) -> "IPersistenceGateway":
        """Get the persistence gateway."""
        if self._gateway is None:
            from shared.database import get_supabase_client
            from shared.gateway import SupabaseGateway
            self._gateway = SupabaseGateway(get_supabase_client())
        return self._gateway

    @property
    def storage(self) -> "IFileStorage":
        """Get the file storage."""
        if self._storage is None:
            from shared.database import get_supabase_client
            from shared.storage import SupabaseStorage
            self._storage = SupabaseStorage(get_supabase_client())
        return self._storage

    @property
    def codec(self) -> "SessionCodec":
        """Get the session codec."""
        if self._codec is None:
            from modules.auth.session import get_session_codec
            self._codec = get_session_codec()
        return self._codec

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(self.gateway, self.codec)
        return self._auth_service

    @property
    def scheduling(self) -> "ISchedulingService":
        """Get the scheduling service instance."""
        if self._scheduling_service is None:
            from modules.scheduling.service import SchedulingService
            self._scheduling_service = SchedulingService(self.gateway)
        return self._scheduling_service

    @property
    def content(self) -> "IContentService":
        """Get the content service instance."""
        if self._content_service is None:
            from modules.content.service import ContentService
            self._content_service = ContentService(self.gateway, self.storage)
        return self._content_service

    @property
    def notifications(self) -> "INotificationService":
        """Get the notification service instance."""
        if self._notification_service is None:
            from modules.notifications.service import NotificationService
            self._notification_service = NotificationService(self.gateway)
        return self._notification_service

    @property
    def admin(self) -> "IAdminService":
        """Get the admin service instance."""
        if self._admin_service is None:
            from modules.admin.service import AdminService
            self._admin_service = AdminService(self.gateway)
        return self._admin_service

    @property
    def plans(self) -> "IPlanService":
        """Get the plan service instance."""
        if self._plan_service is None:
            from modules.plans.service import PlanService
            self._plan_service = PlanService(self.auth)
        return self._plan_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self.__init__()


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_gateway() -> "IPersistenceGateway":
    """FastAPI dependency for the persistence gateway."""
    return get_container().gateway


def get_session_codec() -> "SessionCodec":
    """FastAPI dependency for the session codec."""
    return get_container().codec


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_scheduling_service() -> "ISchedulingService":
    """FastAPI dependency for scheduling service."""
    return get_container().scheduling


def get_content_service() -> "IContentService":
    """FastAPI dependency for content service."""
    return get_container().content


def get_notification_service() -> "INotificationService":
    """FastAPI dependency for notification service."""
    return get_container().notifications


def get_admin_service() -> "IAdminService":
    """FastAPI dependency for admin service."""
    return get_container().admin


def get_plan_service() -> "IPlanService":
    """FastAPI dependency for plan service."""
    return get_container().plans
