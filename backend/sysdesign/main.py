from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sysdesign.api.routes import router
from sysdesign.config import APP_VERSION, CORS_ORIGINS
from sysdesign.db.session import init_db

app = FastAPI(
    title="AI System Design Builder",
    version=APP_VERSION,
)

# Middleware FIRST
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes AFTER middleware
app.include_router(router)


@app.on_event("startup")
def startup():
    init_db()
