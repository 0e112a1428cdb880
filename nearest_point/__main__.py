from nearest_point.bench.cli import main

main()
