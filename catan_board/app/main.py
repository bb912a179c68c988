"""FastAPI application for the board generator."""

import uvicorn

import common.app

from .routers import board

app = common.app.create_app(title='Catan Board Generator')

app.include_router(board.router)


if __name__ == '__main__':
    uvicorn.run(app, host='0.0.0.0', port=8000)
