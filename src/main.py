"""
Appointment Service FastAPI Application

Run with: uvicorn src.main:app --port 3000
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import cleanup, container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.db_setting import dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Appointment Service] Starting up...')

    tracing = TracingConfig(service_name='appointment-service')
    tracing.setup()
    Logger.base.info('📊 [Appointment Service] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Appointment Service] Dependency injection wired')

    engine = get_engine()
    tracing.instrument_sqlalchemy(engine=engine)
    Logger.base.info('🗄️  [Appointment Service] Database engine ready + instrumented')

    Logger.base.info('✅ [Appointment Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Appointment Service] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Appointment Service] Database engine disposed')

    # Flush remaining spans
    tracing.shutdown()

    container.unwire()
    cleanup()

    Logger.base.info('👋 [Appointment Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    return RedirectResponse(url='/docs')


if __name__ == '__main__':
    uvicorn.run('src.main:app', host=settings.SERVER_HOST, port=settings.SERVER_PORT)
