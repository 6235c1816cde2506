import logging

import uvicorn
from fastapi import FastAPI, Request

from config import HOST, LOG_LEVEL, PORT, TZ_OFFSET_COOKIE, _now_local, _set_client_clock
from db import init_db, load_appointments, load_symptoms
from routers import appointments, chat, dashboard, profile, symptoms
from store import AppointmentStore, SymptomStore

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
logger = logging.getLogger(__name__)

init_db()

app = FastAPI(title="Health Tracker")
app.state.symptoms = SymptomStore(load_symptoms(), clock=_now_local)
app.state.appointments = AppointmentStore(load_appointments(), clock=_now_local)
logger.info(
    "Loaded %d symptoms and %d appointments",
    len(app.state.symptoms), len(app.state.appointments),
)


@app.middleware("http")
async def client_clock_middleware(request: Request, call_next):
    _set_client_clock(request.cookies.get(TZ_OFFSET_COOKIE, ""))
    return await call_next(request)


app.include_router(dashboard.router)
app.include_router(symptoms.router)
app.include_router(appointments.router)
app.include_router(chat.router)
app.include_router(profile.router)


if __name__ == "__main__":
    logger.info("Starting server on %s:%d", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT)
