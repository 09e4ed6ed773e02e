import uvicorn

from .config import HOST, PORT


def main() -> None:
    uvicorn.run("city_events_scraper:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
