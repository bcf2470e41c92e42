from uiforge.main import app

app(prog_name="uiforge")
