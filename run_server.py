"""
Run the API server with uvicorn
"""
import uvicorn
from order_api.core.config import settings

if __name__ == "__main__":
    print(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    print(f"Orders file: {settings.ORDERS_FILE}")
    print(f"Server will be available at: http://{settings.HOST}:{settings.PORT}")
    print(f"Health: http://localhost:{settings.PORT}/api/health")
    print("Press Ctrl+C to stop the server")

    uvicorn.run(
        "order_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
