from rssconv.cli import app

app(prog_name="rssconv")
