import contextlib
import functools
import logging
from typing import Any, AsyncIterator, Awaitable, Callable

from jinja2 import Environment, FileSystemLoader, select_autoescape
from rich.logging import RichHandler
from starlette.applications import Starlette
from starlette.background import BackgroundTask
from starlette.requests import Request
from starlette.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from starlette.routing import Route

from rescort import config
from rescort.domain.errors import ValidationError
from rescort.domain.gateway import Gateway, OpenAIGateway
from rescort.domain.models import Language, SearchState, Theme
from rescort.domain.orchestrator import Orchestrator
from rescort.html.dish_detail import DishDetail
from rescort.i18n import t
from rescort.preferences import (
    COLOR_SCHEME_HINT,
    THEME_COOKIE,
    load_preferences,
    save_preferences,
)


logger = logging.getLogger(__name__)


def configure_logging(level: int | str = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def templates_factory(html_dir: Any) -> Environment:
    return Environment(
        loader=FileSystemLoader(html_dir),
        autoescape=select_autoescape(),
    )


def aHTMLResponse(route: Callable[..., Awaitable[str | tuple[str, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        resp = await route(*args, **kwargs)
        if not isinstance(resp, tuple):
            html, code = resp, 200
        else:
            html, code = resp
        return HTMLResponse(html, status_code=code)

    return wrapper


def orchestrator(request: Request) -> Orchestrator:
    """The orchestrator, with preferences refreshed from the request cookies."""
    orch: Orchestrator = request.app.state.orchestrator
    cfg: config.Config = request.app.state.config
    orch.use_preferences(
        load_preferences(
            request.cookies,
            request.headers,
            default_language=cfg.default_language,
        )
    )
    return orch


def render_results(request: Request, state: SearchState) -> str:
    templates: Environment = request.app.state.templates
    dish_html = (
        DishDetail(state.dish, environment=templates, language=state.language).render()
        if state.dish is not None
        else ""
    )
    return templates.get_template("results.html").render(
        state=state,
        lang=state.language,
        dish_html=dish_html,
        t=t,
    )


async def homepage(request: Request) -> HTMLResponse:
    state = orchestrator(request).state
    templates: Environment = request.app.state.templates
    html = templates.get_template("index.html").render(
        state=state,
        lang=state.language,
        languages=list(Language),
        results=render_results(request, state),
        saved_theme=THEME_COOKIE in request.cookies,
        t=t,
    )
    return HTMLResponse(
        html,
        headers={
            "Accept-CH": COLOR_SCHEME_HINT,
            # Ask the browser to retry with the hint on a first visit.
            "Critical-CH": COLOR_SCHEME_HINT,
            "Vary": COLOR_SCHEME_HINT,
        },
    )


@aHTMLResponse
async def results(request: Request) -> str:
    return render_results(request, orchestrator(request).state)


async def search(request: Request) -> HTMLResponse:
    orch = orchestrator(request)
    async with request.form() as form:
        query = str(form.get("query", ""))

    try:
        generation = orch.start(query)
    except ValidationError:
        return HTMLResponse(render_results(request, orch.state))

    # Respond with the loading state straight away, the page polls /results.
    return HTMLResponse(
        render_results(request, orch.state),
        background=BackgroundTask(orch.run, generation),
    )


async def language(request: Request) -> RedirectResponse | PlainTextResponse:
    orch = orchestrator(request)
    async with request.form() as form:
        code = str(form.get("language", ""))
    try:
        lang = Language(code)
    except ValueError:
        return PlainTextResponse(f"Unsupported language: {code}", status_code=400)

    orch.preferences.language = lang
    response = RedirectResponse("/", status_code=303)
    save_preferences(response, orch.preferences)
    return response


async def theme(request: Request) -> RedirectResponse | PlainTextResponse:
    orch = orchestrator(request)
    async with request.form() as form:
        value = form.get("theme")
    if value is None:
        new_theme = orch.preferences.theme.toggled()
    else:
        try:
            new_theme = Theme(str(value))
        except ValueError:
            return PlainTextResponse(f"Unsupported theme: {value}", status_code=400)

    orch.preferences.theme = new_theme
    response = RedirectResponse("/", status_code=303)
    save_preferences(response, orch.preferences)
    return response


async def copy_text(request: Request) -> PlainTextResponse:
    dish = orchestrator(request).state.dish
    if dish is None:
        return PlainTextResponse("No dish.", status_code=404)
    match request.path_params["section"]:
        case "ingredients":
            return PlainTextResponse(dish.ingredients_text)
        case "recipe":
            return PlainTextResponse(dish.recipe_text)
        case section:
            return PlainTextResponse(f"Unknown section: {section}", status_code=404)


def create_app(
    cfg: config.Config | None = None,
    *,
    gateway: Gateway | None = None,
) -> Starlette:
    cfg = config.Config() if cfg is None else cfg

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        if app.state.orchestrator is None:
            # Raises ConfigurationError without an API key.
            app.state.orchestrator = Orchestrator(OpenAIGateway(cfg))
        logger.info("Rescort ready (%s).", cfg.env.value)
        yield
        await app.state.orchestrator.gateway.aclose()

    app = Starlette(
        debug=True if cfg.env == config.Env.local else False,
        routes=[
            Route("/", homepage),
            Route("/search", search, methods=["POST"]),
            Route("/results", results),
            Route("/language", language, methods=["POST"]),
            Route("/theme", theme, methods=["POST"]),
            Route("/copy/{section:str}", copy_text),
        ],
        lifespan=lifespan,
    )
    app.state.config = cfg
    app.state.templates = templates_factory(cfg.html_dir)
    app.state.orchestrator = None if gateway is None else Orchestrator(gateway)
    return app


CONFIG = config.Config()

configure_logging(CONFIG.log_level)

app = create_app(CONFIG)
