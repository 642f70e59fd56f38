"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from gpa_tracker.adapters.reportlab_result_card_renderer import (
    ReportlabResultCardRenderer,
)
from gpa_tracker.adapters.supabase_result_repository import SupabaseResultRepository
from gpa_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from gpa_tracker.config import Settings
from gpa_tracker.services.results import ResultService
from gpa_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    result_service: ResultService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(
        SupabaseUserRepository(supabase_client, resolved_settings.users_table)
    )
    result_service = ResultService(
        repository=SupabaseResultRepository(
            supabase_client, resolved_settings.results_table
        ),
        renderer=ReportlabResultCardRenderer(),
    )

    async def close_resources() -> None:
        """Nothing to release; the Supabase client holds no open sessions."""

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        result_service=result_service,
        close_resources=close_resources,
    )
