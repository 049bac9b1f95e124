import math

SIGN_NAMES = ("Aries","Taurus","Gemini","Cancer","Leo","Virgo","Libra","Scorpio","Sagittarius","Capricorn","Aquarius","Pisces")

# Fire, Earth, Air, Water repeats every four signs
ELEMENT_NAMES = ("Fire", "Earth", "Air", "Water")


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))

def normalize_angle(angle: float) -> float:
    a = angle % 360.0
    if a < 0:
        a += 360.0
    # tiny negatives can round up to 360.0
    return 0.0 if a >= 360.0 else a

def sign_index_from_lon(lon: float) -> int:
    return int(normalize_angle(lon) // 30) % 12

def sign_name_from_lon(lon: float) -> str:
    return SIGN_NAMES[sign_index_from_lon(lon)]

def element_from_lon(lon: float) -> str:
    return ELEMENT_NAMES[sign_index_from_lon(lon) % 4]

def fmt_deg(lon: float) -> str:
    # 0..360 to "123°04"; minutes that round to 60 carry into the degree
    norm = normalize_angle(lon)
    deg = int(math.floor(norm))
    mins = round_half_up((norm - deg) * 60)
    if mins == 60:
        deg, mins = (deg + 1) % 360, 0
    return f"{deg}°{mins:02d}"
