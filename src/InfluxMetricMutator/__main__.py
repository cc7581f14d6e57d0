from InfluxMetricMutator.cli.app import main

main()
