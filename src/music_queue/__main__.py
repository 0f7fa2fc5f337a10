from music_queue.cli import run

if __name__ == "__main__":
    run()
