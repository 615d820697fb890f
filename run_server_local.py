"""
Special function for running the resume ATS API server locally whenever required.

Run `python run_server_local.py` in the terminal to launch the server and
host the swagger UI at `http://0.0.0.0:8001/docs`. Host and port can be
overridden with the API_HOST / API_PORT environment variables (or `.env`).
"""
import os
import signal
import sys

import uvicorn

from resume_ats.logging import LoggerFactory

logger = LoggerFactory().get_logger(name="run_server_local")

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8001"))


def main():
    # Uvicorn is driven programmatically so Ctrl+C shuts it down cleanly
    config = uvicorn.Config(
        "api.server:app",
        host=API_HOST,
        port=API_PORT,
        reload=True
    )
    server = uvicorn.Server(config)

    def handle_exit(sig, frame):
        logger.info("Shutting down resume ATS API...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_exit)
    signal.signal(signal.SIGTERM, handle_exit)

    logger.info(f"Serving resume ATS API at http://{API_HOST}:{API_PORT}/docs")
    server.run()
    logger.info("Server stopped cleanly.")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received. Exiting...")
        sys.exit(0)
