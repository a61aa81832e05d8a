from cellcontrol.main import run

run()
