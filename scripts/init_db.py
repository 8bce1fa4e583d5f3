from dashboard.config import get_settings
from dashboard.db.engine import build_engine
from dashboard.db.schema import metadata

def main():
    engine = build_engine(get_settings().DATABASE_URL)
    try:
        metadata.drop_all(engine)
        metadata.create_all(engine)
    finally:
        engine.dispose()
    print("DB schema created.")

if __name__ == "__main__":
    main()
