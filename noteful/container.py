"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from noteful.application.services.password_hashing import WerkzeugPasswordHasher
from noteful.application.services.tokens import JwtTokenService
from noteful.application.use_cases.users.login_user import LoginUserUseCase
from noteful.application.use_cases.users.refresh_token import RefreshTokenUseCase
from noteful.application.use_cases.users.register_user import RegisterUserUseCase
from noteful.infrastructure.db import build_engine, build_session_factory
from noteful.infrastructure.repositories.users import SqlAlchemyUserRepository
from noteful.interfaces.http.controllers.auth_controller import AuthController
from noteful.interfaces.http.controllers.misc_controller import MiscController
from noteful.interfaces.http.controllers.users_controller import UsersController
from noteful.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.security.password_hash_method)

    @cached_property
    def token_service(self) -> JwtTokenService:
        jwt_config = self.config.jwt
        return JwtTokenService(
            secret=jwt_config.secret,
            algorithm=jwt_config.algorithm,
            ttl=jwt_config.expiry,
            leeway=jwt_config.leeway,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def refresh_token_use_case(self) -> RefreshTokenUseCase:
        return RefreshTokenUseCase(tokens=self.token_service)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            login_use_case=self.login_user_use_case,
            refresh_use_case=self.refresh_token_use_case,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(register_use_case=self.register_user_use_case)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.engine)
