import fastapi

from controller import home

app = fastapi.FastAPI(title="devops")
app.include_router(home.router)


if __name__ == "__main__":
    from main import serve

    serve()
