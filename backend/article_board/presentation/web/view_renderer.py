"""View rendering port and its Jinja2 implementation."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

_BUNDLED_TEMPLATES = Path(__file__).resolve().parent / "templates"


class ViewRenderer(ABC):
    """Port for turning a named template plus a view model into a response."""

    @abstractmethod
    def render(
        self,
        request: Request,
        template: str,
        context: dict[str, Any],
        status_code: int = 200,
    ) -> Response:
        """Render ``template`` (without extension) with ``context``."""
        ...


class Jinja2ViewRenderer(ViewRenderer):
    """Renders ``<template>.html`` files through FastAPI's Jinja2Templates."""

    def __init__(self, templates_dir: str | Path | None = None, app_title: str = "Article Board"):
        directory = Path(templates_dir) if templates_dir else _BUNDLED_TEMPLATES
        self._templates = Jinja2Templates(directory=str(directory))
        self._templates.env.globals["app_title"] = app_title

    def render(
        self,
        request: Request,
        template: str,
        context: dict[str, Any],
        status_code: int = 200,
    ) -> Response:
        return self._templates.TemplateResponse(
            request,
            f"{template}.html",
            context,
            status_code=status_code,
        )
