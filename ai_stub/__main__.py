import logging
import os

from ai_stub import create_stub_app

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")

app = create_stub_app()

if __name__ == "__main__":
    port = int(os.getenv("AI_STUB_PORT", "8000"))
    app.run(host="0.0.0.0", port=port)
