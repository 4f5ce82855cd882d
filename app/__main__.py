import uvicorn

from app.main import app

HOST = "0.0.0.0"
PORT = 8123

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
