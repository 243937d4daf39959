from quilt.main import app

app()
