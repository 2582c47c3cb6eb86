from dependency_injector import containers, providers
from redis import Redis
from sqlalchemy.orm import Session

from lms.application.analytics.use_cases.analytics_use_case import AnalyticsUseCase
from lms.application.courses.use_cases.course_discussion_use_case import CourseDiscussionUseCase
from lms.application.courses.use_cases.course_management_use_case import CourseManagementUseCase
from lms.application.courses.use_cases.course_query_use_case import CourseQueryUseCase
from lms.application.identity.use_cases.authentication_use_case import AuthenticationUseCase
from lms.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from lms.application.identity.use_cases.update_user_use_case import UpdateUserUseCase
from lms.application.identity.use_cases.user_admin_use_case import UserAdminUseCase
from lms.application.layout.use_cases.layout_use_case import LayoutUseCase
from lms.application.notifications.services.notifier import Notifier
from lms.application.notifications.use_cases.notification_use_case import NotificationUseCase
from lms.application.orders.use_cases.order_use_case import OrderUseCase
from lms.domain.analytics.services.month_buckets import MonthBucketService
from lms.domain.courses.services.rating_service import CourseRatingService
from lms.infrastructure.common.services.mail_service import SmtpMailService
from lms.infrastructure.common.services.media_storage import LocalMediaStorage
from lms.infrastructure.courses.repositories import CourseRepository
from lms.infrastructure.courses.services.course_cache import RedisCourseCache
from lms.infrastructure.identity.auth.password_service import PasswordService
from lms.infrastructure.identity.auth.token_service import TokenService
from lms.infrastructure.identity.repositories import UserRepository
from lms.infrastructure.identity.services.session_store import RedisSessionStore
from lms.infrastructure.layout.repositories import LayoutRepository
from lms.infrastructure.notifications.repositories import NotificationRepository
from lms.infrastructure.orders.repositories import OrderRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Request-scoped resources, provided at runtime
    db = providers.Dependency(instance_of=Session)
    cache = providers.Dependency(instance_of=Redis)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    course_repository = providers.Factory(CourseRepository, db=db)
    order_repository = providers.Factory(OrderRepository, db=db)
    notification_repository = providers.Factory(NotificationRepository, db=db)
    layout_repository = providers.Factory(LayoutRepository, db=db)

    # Infrastructure services
    password_service = providers.Singleton(PasswordService)
    token_service = providers.Singleton(TokenService)
    mail_service = providers.Singleton(SmtpMailService)
    media_storage = providers.Singleton(LocalMediaStorage)
    session_store = providers.Factory(RedisSessionStore, cache=cache)
    course_cache = providers.Factory(RedisCourseCache, cache=cache)

    # Domain services (pure domain logic, no db)
    course_rating_service = providers.Factory(CourseRatingService)
    month_bucket_service = providers.Factory(MonthBucketService)

    notifier = providers.Factory(Notifier, notification_repository=notification_repository)

    # Identity module, application use cases
    register_user_use_case = providers.Factory(
        RegisterUserUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
        mail_service=mail_service,
    )
    authentication_use_case = providers.Factory(
        AuthenticationUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
        session_store=session_store,
    )
    update_user_use_case = providers.Factory(
        UpdateUserUseCase,
        user_repository=user_repository,
        password_service=password_service,
        session_store=session_store,
        media_storage=media_storage,
        course_repository=course_repository,
        course_cache=course_cache,
    )
    user_admin_use_case = providers.Factory(
        UserAdminUseCase,
        user_repository=user_repository,
        session_store=session_store,
        course_repository=course_repository,
        course_cache=course_cache,
    )

    # Courses module, application use cases
    course_management_use_case = providers.Factory(
        CourseManagementUseCase,
        course_repository=course_repository,
        course_cache=course_cache,
        media_storage=media_storage,
    )
    course_query_use_case = providers.Factory(
        CourseQueryUseCase,
        course_repository=course_repository,
        course_cache=course_cache,
        user_repository=user_repository,
    )
    course_discussion_use_case = providers.Factory(
        CourseDiscussionUseCase,
        course_repository=course_repository,
        course_cache=course_cache,
        user_repository=user_repository,
        notifier=notifier,
        mail_service=mail_service,
        rating_service=course_rating_service,
    )

    # Orders module, application use cases
    order_use_case = providers.Factory(
        OrderUseCase,
        order_repository=order_repository,
        course_repository=course_repository,
        user_repository=user_repository,
        session_store=session_store,
        course_cache=course_cache,
        notifier=notifier,
        mail_service=mail_service,
    )

    notification_use_case = providers.Factory(
        NotificationUseCase,
        notification_repository=notification_repository,
    )
    layout_use_case = providers.Factory(
        LayoutUseCase,
        layout_repository=layout_repository,
        media_storage=media_storage,
    )
    analytics_use_case = providers.Factory(
        AnalyticsUseCase,
        user_repository=user_repository,
        course_repository=course_repository,
        order_repository=order_repository,
        month_bucket_service=month_bucket_service,
    )


container = Container()
