"""
FastAPI dependencies that build services for a request.

The store and settings are attached to ``app.state`` by
``main.create_app``; every service instance works on that store.
"""

from fastapi import Request

from blog_api.app.core.config import Settings
from blog_api.app.core.store import BlogStore
from blog_api.app.services.auth_service import AuthService
from blog_api.app.services.comment_service import CommentService
from blog_api.app.services.contact_service import ContactService
from blog_api.app.services.post_service import PostService
from blog_api.app.services.statistics_service import StatisticsService
from blog_api.app.services.subscriber_service import SubscriberService
from blog_api.app.services.upload_service import UploadService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> BlogStore:
    return request.app.state.store


def get_upload_service(request: Request) -> UploadService:
    app_settings = get_settings(request)
    return UploadService(app_settings.upload_dir, max_bytes=app_settings.max_upload_bytes)


def get_post_service(request: Request) -> PostService:
    return PostService(get_store(request), get_upload_service(request))


def get_comment_service(request: Request) -> CommentService:
    return CommentService(get_store(request))


def get_subscriber_service(request: Request) -> SubscriberService:
    return SubscriberService(get_store(request))


def get_contact_service(request: Request) -> ContactService:
    return ContactService(get_store(request))


def get_statistics_service(request: Request) -> StatisticsService:
    return StatisticsService(get_store(request), live_views=get_settings(request).live_stats)


def get_auth_service(request: Request) -> AuthService:
    return AuthService(get_store(request), get_settings(request))
