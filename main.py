from contextlib import asynccontextmanager

import redis.asyncio as redis
from fastapi import FastAPI, Request
from loguru import logger
from redis.exceptions import RedisError
from strawberry.fastapi import GraphQLRouter

from aeronave_gateway.aeronave_store import AeronaveStore
from aeronave_gateway.aeronave_controller import AeronaveController
from aeronave_gateway.api import schema
from config.settings import settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One client (connection pool) shared by every request
    try:
        app.state.redis = redis.from_url(settings.database_url, decode_responses=True)
    except ValueError as e:
        # Malformed DB_* settings, nothing to serve without a client
        logger.error("Server failed: {}", e)
        raise

    try:
        await app.state.redis.ping()
        logger.info("Database connected")
    except RedisError as e:
        logger.error("Database failed: {}", e)

    app.state.aeronave_store = AeronaveStore(app.state.redis, settings.db_name)
    app.state.aeronave_controller = AeronaveController(app.state.aeronave_store)

    logger.info("Server ready at http://{}:{}/graphql", settings.host, settings.port)
    logger.info("GraphQL Playground at http://{}:{}/playground", settings.host, settings.port)
    try:
        yield
    finally:
        await app.state.redis.aclose()


async def get_context(request: Request):
    return {
        "request": request,
        "aeronave_store": request.app.state.aeronave_store,
        "aeronave_controller": request.app.state.aeronave_controller,
    }

# API endpoint, plus the GraphiQL explorer bound to the same schema and context
graphql_app = GraphQLRouter(schema, context_getter=get_context, graphql_ide=None)
playground_app = GraphQLRouter(schema, context_getter=get_context, graphql_ide="graphiql")

app = FastAPI(lifespan=lifespan)
app.include_router(graphql_app, prefix="/graphql")
app.include_router(playground_app, prefix="/playground")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.reload)
