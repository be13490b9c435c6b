from runway_sim.cli import main

main()
