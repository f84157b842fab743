# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .login_user import LoginUserUseCase
from .refresh_token import RefreshTokenUseCase
from .register_user import RegisterUserUseCase

__all__ = ["LoginUserUseCase", "RefreshTokenUseCase", "RegisterUserUseCase"]
