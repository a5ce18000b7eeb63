from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import calculator_routes, catalog_routes

app = FastAPI(title="Storage Calculator")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(catalog_routes, prefix="/catalog")
app.include_router(calculator_routes, prefix="/calculator")


@app.get("/health")
def health():
    return {"status": "ok"}
