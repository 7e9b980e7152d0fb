from findr.main import run

run()
