from tile_jigsaw.application.TileJigsawApplication import TileJigsawApplication


# ----------------------------------------------------------------------------------------------------------------------
def main() -> int:
    """
    Runs the TileJigsaw application.
    """
    application = TileJigsawApplication()

    return application.run()


# ----------------------------------------------------------------------------------------------------------------------
if __name__ == '__main__':
    raise SystemExit(main())
