from artifact_provenance.cli.main import main

main()
