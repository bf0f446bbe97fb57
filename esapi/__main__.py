from esapi.cli import app

app(prog_name='esapi')
