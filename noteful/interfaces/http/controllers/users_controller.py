# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from noteful.application.use_cases.users.register_user import RegisterUserUseCase
from noteful.interfaces.http.dto.users import UserResponseDTO, validate_registration


class UsersController:
    def __init__(self, *, register_use_case: RegisterUserUseCase) -> None:
        self._register_use_case = register_use_case

    def create(self) -> tuple[Response, int]:
        dto = validate_registration(request.get_json(silent=True))

        user = self._register_use_case.execute(dto.username, dto.password, dto.fullname)

        response = jsonify(UserResponseDTO(**user.to_dict()).model_dump())
        response.headers["Location"] = f"{request.base_url.rstrip('/')}/{user.id}"
        return response, 201

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/api/users")
        bp.add_url_rule("", view_func=self.create, methods=["POST"], strict_slashes=False)
        return bp
