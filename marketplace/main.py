# marketplace/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marketplace.core.config import get_settings
from marketplace.core.database import init_db
from marketplace.chat.routes import router as chat_router
from marketplace.ticket.routes import assigned_router, router as ticket_router
from marketplace.user.routes import router as user_router

settings = get_settings()
logging.basicConfig(level=settings.LOG_LEVEL.upper())

init_db()

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESC,
    version=settings.APP_VERSION,
)

origins = settings.cors_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(user_router, prefix=settings.API_PREFIX)
app.include_router(ticket_router, prefix=settings.API_PREFIX)
app.include_router(assigned_router, prefix=settings.API_PREFIX)
app.include_router(chat_router, prefix=settings.API_PREFIX)

@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
