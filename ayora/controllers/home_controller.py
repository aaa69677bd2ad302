from datetime import datetime, timezone

from flask import current_app

from ayora.extensions import db
from ayora.utils.http import ok


def home_index():
    return ok({"message": "Ayora API is running"})


def health_check():
    db_status = "healthy"
    try:
        db.session.execute(db.text("SELECT 1"))
    except Exception as e:
        current_app.logger.error(f"Database health check failed: {e}")
        db_status = "unhealthy"

    return ok({
        "status": "OK" if db_status == "healthy" else "DEGRADED",
        "message": "Ayora backend is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": db_status,
    })
