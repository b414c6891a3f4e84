from prepnotes.main import run

run()
