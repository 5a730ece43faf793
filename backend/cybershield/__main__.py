from cybershield.main import run


run()
