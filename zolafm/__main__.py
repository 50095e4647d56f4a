from zolafm.cli import app

app(prog_name="zolafm")
