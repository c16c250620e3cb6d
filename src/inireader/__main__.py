from inireader.cli import run

run()
