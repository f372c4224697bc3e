from __future__ import annotations


ADJECTIVES: tuple[str, ...] = (
    "ancient", "autumn", "bold", "brave", "bright", "calm", "clever", "coastal", "cosmic",
    "crimson", "dancing", "daring", "desert", "divine", "double", "dreamy", "eager", "electric",
    "elegant", "ember", "fancy", "fierce", "flying", "forest", "frozen", "gentle", "golden",
    "happy", "hidden", "hollow", "humble", "icy", "infinite", "inner", "jade", "jolly", "joyful",
    "kind", "lazy", "little", "lonely", "lunar", "magic", "merry", "mighty", "misty", "morning",
    "mystic", "noble", "ocean", "peaceful", "proud", "purple", "quiet", "rapid", "royal", "ruby",
    "rustic", "sacred", "sandy", "secret", "shadow", "silent", "silver", "simple", "singing",
    "sleepy", "snowy", "solar", "spring", "storm", "summer", "sunny", "swift", "thunder",
    "tiger", "tiny", "triple", "twilight", "urban", "vintage", "wild", "winter", "wise",
    "wondering",
)

NOUNS: tuple[str, ...] = (
    "angel", "autumn", "badger", "bamboo", "beach", "bear", "bird", "blossom", "breeze", "brook",
    "butterfly", "canopy", "canyon", "castle", "cave", "cloud", "coral", "crystal", "dawn",
    "deer", "desert", "dolphin", "dragon", "dream", "eagle", "echo", "ember", "falcon",
    "feather", "fire", "fish", "flame", "flower", "forest", "fox", "garden", "gate", "gazelle",
    "ghost", "glacier", "glade", "grove", "harbor", "hawk", "heart", "hero", "hill", "horizon",
    "island", "jungle", "lagoon", "lake", "leaf", "lion", "lotus", "mammoth", "meadow", "meteor",
    "mirror", "moon", "mountain", "night", "ocean", "orchid", "owl", "palm", "path", "penguin",
    "phoenix", "pirate", "pond", "rabbit", "rain", "rainbow", "rapids", "river", "rose", "sage",
    "sailor", "sea", "shadow", "shark", "sky", "snow", "sparrow", "spring", "star", "stone",
    "storm", "stream", "sun", "sunrise", "sunset", "swift", "tiger", "tree", "valley", "wave",
    "whale", "wind", "wolf", "wood",
)
