from sqlite_viz.cli import app

app(prog_name="sqlite-viz")
