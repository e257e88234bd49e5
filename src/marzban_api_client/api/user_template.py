"""User template endpoints."""

from ..client import BaseClient
from ..dispatch import (
    Endpoint,
    conflict,
    error_table,
    json_as,
    json_body,
    not_found,
    query_params,
    text,
)
from ..models.user_template import (
    UserTemplateCreate,
    UserTemplateModify,
    UserTemplateResponse,
)

TEMPLATE_NOT_FOUND = not_found("User Template")
TEMPLATE_CONFLICT = conflict("Template by this name already exists")

GET_USER_TEMPLATES = Endpoint(
    "GET",
    "/api/user_template",
    json_as(list[UserTemplateResponse]),
    error_table(unprocessable=True),
)
ADD_USER_TEMPLATE = Endpoint(
    "POST",
    "/api/user_template",
    json_as(UserTemplateResponse),
    error_table(forbidden=True, conflict=TEMPLATE_CONFLICT, unprocessable=True),
)
GET_USER_TEMPLATE = Endpoint(
    "GET",
    "/api/user_template/{template_id}",
    json_as(UserTemplateResponse),
    error_table(not_found=TEMPLATE_NOT_FOUND, unprocessable=True),
)
MODIFY_USER_TEMPLATE = Endpoint(
    "PUT",
    "/api/user_template/{template_id}",
    json_as(UserTemplateResponse),
    error_table(
        forbidden=True,
        not_found=TEMPLATE_NOT_FOUND,
        conflict=TEMPLATE_CONFLICT,
        unprocessable=True,
    ),
)
REMOVE_USER_TEMPLATE = Endpoint(
    "DELETE",
    "/api/user_template/{template_id}",
    text,
    error_table(forbidden=True, not_found=TEMPLATE_NOT_FOUND, unprocessable=True),
)


class UserTemplateAPI(BaseClient):
    """``/api/user_template`` operations."""

    async def get_user_templates(
        self,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[UserTemplateResponse]:
        return await self._call(
            GET_USER_TEMPLATES,
            params=query_params(offset=offset, limit=limit),
        )

    async def add_user_template(
        self,
        body: UserTemplateCreate,
    ) -> UserTemplateResponse:
        """Create a template. ``data_limit`` is in bytes, ``0`` for unlimited."""
        return await self._call(ADD_USER_TEMPLATE, json=json_body(body))

    async def get_user_template(self, template_id: int) -> UserTemplateResponse:
        return await self._call(
            GET_USER_TEMPLATE,
            path_params={"template_id": template_id},
        )

    async def modify_user_template(
        self,
        template_id: int,
        body: UserTemplateModify,
    ) -> UserTemplateResponse:
        return await self._call(
            MODIFY_USER_TEMPLATE,
            path_params={"template_id": template_id},
            json=json_body(body),
        )

    async def remove_user_template(self, template_id: int) -> str:
        return await self._call(
            REMOVE_USER_TEMPLATE,
            path_params={"template_id": template_id},
        )
