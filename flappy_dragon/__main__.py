from flappy_dragon.main import main

main()
