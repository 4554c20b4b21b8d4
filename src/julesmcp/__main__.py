from julesmcp.cli import app

app()
