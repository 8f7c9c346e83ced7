from typing import Optional

from fastapi import FastAPI

from recipe_ai.clients.gemini import GeminiClient
from recipe_ai.clients.identity import IdentityClient
from recipe_ai.clients.webhook import WorkflowWebhookClient
from recipe_ai.core import config
from recipe_ai.core.logging import setup_logging
from recipe_ai.core.middleware import RequestLoggingMiddleware
from recipe_ai.routers import auth, generate, health, recipes_library, recipes_ops, recipes_parse
from recipe_ai.services.recipe_generator import RecipeGenerator
from recipe_ai.services.recipes_repo import RecipeStore


def create_app(
    *,
    store: Optional[RecipeStore] = None,
    generator: Optional[RecipeGenerator] = None,
    identity: Optional[IdentityClient] = None,
    gemini: Optional[GeminiClient] = None,
) -> FastAPI:
    app = FastAPI(title="Recipe AI", version=config.APP_VERSION)
    app.include_router(auth.router)
    app.include_router(generate.router)
    app.include_router(recipes_parse.router)
    app.include_router(recipes_ops.router)
    app.include_router(recipes_library.router)
    app.include_router(health.router)

    setup_logging()

    app.add_middleware(RequestLoggingMiddleware)

    if store is None:
        store = RecipeStore(config.RECIPE_DB)
        store.ensure_schema()

    if gemini is None:
        gemini = GeminiClient(
            api_key=config.GEMINI_API_KEY,
            base_url=config.GEMINI_BASE_URL,
            model=config.GEMINI_MODEL,
        )

    if generator is None:
        generator = RecipeGenerator(
            webhook_client=WorkflowWebhookClient(
                config.RECIPE_WEBHOOK_URL, timeout_s=config.RECIPE_WEBHOOK_TIMEOUT_S
            ),
            gemini_client=gemini,
        )

    if identity is None:
        identity = IdentityClient(config.SUPABASE_URL, config.SUPABASE_ANON_KEY)

    app.state.store = store
    app.state.generator = generator
    app.state.identity = identity
    app.state.gemini = gemini

    return app
