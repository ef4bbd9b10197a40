from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator
import uvicorn

from config import CORS_ORIGINS, HOST, PORT
from routes import router
from logger import logger

def create_app():
    app = FastAPI(title="Rates Service")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def startup():
        logger.info("Rates Service startup")

    @app.on_event("shutdown")
    async def shutdown():
        logger.info("Rates Service shutdown")

    Instrumentator().instrument(app).expose(app)
    app.include_router(router)

    return app

app = create_app()

if __name__ == '__main__':
    uvicorn.run(app, host=HOST, port=PORT)
