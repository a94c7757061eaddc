"""Configuration providers."""

from dishka import Scope, from_context, provide

from satya.config import AuthSettings, PlatformSettings, Settings, TrendingSettings
from satya.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Serves the container's Settings and the sections services depend on.

    Settings arrive as container context, so the app and its container
    always share one instance.
    """

    scope = Scope.APP

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide
    def auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def platform_settings(self, settings: Settings) -> PlatformSettings:
        return settings.platform

    @provide
    def trending_settings(self, settings: Settings) -> TrendingSettings:
        return settings.trending
