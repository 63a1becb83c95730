from webmercator_dist.cli import main

main()
