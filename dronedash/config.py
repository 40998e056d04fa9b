"""Static configuration for the DroneDash dispatch simulator.

Values here are plain module-level constants. Runtime switches (generator
seed, log verbosity) are parsed by the console entry point in
``dronedash.cli``.

Constants:
    SEED_DRONE_NAMES: Drones present in every freshly built fleet, in id order.
    CITIES, STREETS, CUSTOMER_NAMES: Pools the random order generator draws
        customer and address content from.
    CANCEL_CODE: Console input that cancels a prompt or leaves a submenu.
"""

SEED_DRONE_NAMES = ("Bob", "Rick")

CITIES = (
    "Warszawa", "Kraków", "Gdańsk", "Wrocław", "Poznań",
    "Katowice", "Chorzów", "Sosnowiec", "Sopot", "Gdynia",
)

STREETS = (
    "ul.Lipowa", "ul.Leśna", "ul.Słoneczna", "ul.Ogrodowa", "ul.Polna", "ul.Długa",
    "ul.Szkolna", "ul.Jęczmienna", "ul.Wiosenna", "ul.Chorzowska", "ul.Katowicka",
)

CUSTOMER_NAMES = (
    ("Jan", "Kowalski"),
    ("Anna", "Nowak"),
    ("Piotr", "Zieliński"),
    ("Kasia", "Wiśniewska"),
    ("Marek", "Woźniak"),
    ("Agnieszka", "Kaczmarek"),
    ("Tomasz", "Mazur"),
    ("Magda", "Krawczyk"),
    ("Łukasz", "Piotrowski"),
    ("Ewa", "Grabowska"),
)

CANCEL_CODE = "0"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
