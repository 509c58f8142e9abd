"""Static 90s content served by the API. Read-only after import."""

from app.models.schemas import Movie, NinetiesData, Song

NINETIES_DATA = NinetiesData(
    movies=[
        Movie(title="Pulp Fiction", year=1994, genre="Crime"),
        Movie(title="The Matrix", year=1999, genre="Sci-Fi"),
        Movie(title="Titanic", year=1997, genre="Romance"),
        Movie(title="Jurassic Park", year=1993, genre="Adventure"),
        Movie(title="Forrest Gump", year=1994, genre="Drama"),
    ],
    music=[
        Song(artist="Nirvana", song="Smells Like Teen Spirit", year=1991),
        Song(artist="Backstreet Boys", song="I Want It That Way", year=1999),
        Song(artist="Spice Girls", song="Wannabe", year=1996),
        Song(artist="TLC", song="Waterfalls", year=1994),
        Song(artist="Oasis", song="Wonderwall", year=1995),
    ],
    trends=[
        "Tamagotchi",
        "Beanie Babies",
        "Pogs",
        "Slap Bracelets",
        "Fanny Packs",
        "Platform Shoes",
        "Choker Necklaces",
        "Crop Tops",
    ],
)
