from dictlookup.cli.main import app

app(prog_name="dictlookup")
