from readme_sync.cli import app

if __name__ == "__main__":
    app()
