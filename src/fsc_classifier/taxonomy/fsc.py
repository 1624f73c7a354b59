"""
FSC (Federal Supply Classification) taxonomy module.

The FSC product taxonomy has 2 levels:
- Group (2-character prefix: 10, 15, 59, ...)
- Class (4-character code: 1005, 5935, 8040, ...)

Every class carries a short list of lexical keywords used by the keyword matcher.
Every group carries a name and keywords used to build its retrieval embedding.

Usage:
    python -m fsc_classifier.taxonomy.fsc                      # print summary
    python -m fsc_classifier.taxonomy.fsc --export data.json   # write keywords-data JSON
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from fsc_classifier.errors import TaxonomyError
from fsc_classifier.schemas.contracts import Category, Group

logger = logging.getLogger(__name__)


# =============================================================================
# FSC GROUPS
# =============================================================================

FSC_GROUPS = [
    {"prefix": "10", "name": "Weapons", "keywords": ["weapons", "guns", "firearms", "armament", "ordnance", "military", "defense", "munitions"]},
    {"prefix": "12", "name": "Fire Control Equipment", "keywords": ["fire control", "targeting", "aiming", "weapons systems", "ballistic", "gun sights"]},
    {"prefix": "14", "name": "Guided Missiles", "keywords": ["missiles", "guided missile", "rocket", "warhead", "guidance systems", "defense", "munitions"]},
    {"prefix": "15", "name": "Aircraft & Airframe Components", "keywords": ["aircraft", "airframe", "aviation", "airplane", "fuselage", "wing"]},
    {"prefix": "16", "name": "Aircraft Components & Accessories", "keywords": ["aircraft", "aviation", "helicopter", "landing gear", "propeller", "rotor", "aerospace"]},
    {"prefix": "17", "name": "Aircraft Launch & Recovery Equipment", "keywords": ["aircraft", "carrier", "catapult", "arresting", "ground support", "airfield"]},
    {"prefix": "18", "name": "Space Vehicles", "keywords": ["spacecraft", "satellite", "space", "aerospace", "orbital", "rocket", "space launch"]},
    {"prefix": "20", "name": "Ship & Marine Equipment", "keywords": ["marine", "ship", "boat", "vessel", "naval", "maritime", "nautical", "sea"]},
    {"prefix": "22", "name": "Railway Equipment", "keywords": ["railroad", "railway", "train", "locomotive", "rail", "rolling stock", "track"]},
    {"prefix": "23", "name": "Motor Vehicles", "keywords": ["vehicles", "trucks", "cars", "automotive", "motor vehicle", "transportation"]},
    {"prefix": "24", "name": "Tractors", "keywords": ["tractors", "farm equipment", "agricultural", "earthmoving", "crawler"]},
    {"prefix": "25", "name": "Vehicle Components", "keywords": ["vehicle parts", "automotive", "brakes", "transmission", "chassis", "drivetrain"]},
    {"prefix": "26", "name": "Tires & Tubes", "keywords": ["tires", "tubes", "pneumatic", "aircraft tires"]},
    {"prefix": "28", "name": "Engines & Turbines", "keywords": ["engines", "turbines", "diesel", "gas turbine", "jet engine", "propulsion", "power plants"]},
    {"prefix": "29", "name": "Engine Accessories", "keywords": ["engine", "fuel systems", "ignition", "cooling", "filters", "turbocharger"]},
    {"prefix": "30", "name": "Mechanical Power Transmission", "keywords": ["gears", "bearings", "transmission", "belts", "pulleys", "couplings", "drivetrain"]},
    {"prefix": "31", "name": "Bearings", "keywords": ["bearings", "ball bearings", "roller bearings", "bushings", "pillow blocks"]},
    {"prefix": "32", "name": "Woodworking Machinery", "keywords": ["woodworking", "sawmill", "lumber", "timber", "wood", "carpentry"]},
    {"prefix": "34", "name": "Metalworking Machinery", "keywords": ["metalworking", "machining", "CNC", "welding", "lathe", "milling", "fabrication", "machine tools"]},
    {"prefix": "35", "name": "Service & Trade Equipment", "keywords": ["laundry", "sewing", "packaging", "vending", "commercial equipment"]},
    {"prefix": "36", "name": "Special Industry Machinery", "keywords": ["food processing", "printing", "plastics", "pharmaceutical", "semiconductor", "manufacturing", "foundry"]},
    {"prefix": "37", "name": "Agricultural Machinery", "keywords": ["agricultural", "farming", "harvesting", "gardening", "livestock", "crop", "soil"]},
    {"prefix": "38", "name": "Construction & Mining Equipment", "keywords": ["construction", "mining", "excavation", "crane", "earthmoving", "heavy equipment", "petroleum"]},
    {"prefix": "39", "name": "Materials Handling Equipment", "keywords": ["material handling", "conveyor", "forklift", "warehouse", "hoist", "winch", "elevator"]},
    {"prefix": "40", "name": "Rope, Cable, Chain & Fittings", "keywords": ["rope", "cable", "chain", "wire rope", "cordage", "rigging"]},
    {"prefix": "41", "name": "Refrigeration & Air Conditioning", "keywords": ["refrigeration", "HVAC", "air conditioning", "cooling", "freezer", "ventilation"]},
    {"prefix": "42", "name": "Fire Fighting & Safety Equipment", "keywords": ["firefighting", "safety", "rescue", "diving", "decontamination", "hazmat", "recycling"]},
    {"prefix": "43", "name": "Pumps & Compressors", "keywords": ["pumps", "compressors", "vacuum", "hydraulic", "pneumatic"]},
    {"prefix": "44", "name": "Furnaces & Boilers", "keywords": ["boilers", "furnaces", "heat exchangers", "dryers", "ovens", "kilns", "steam"]},
    {"prefix": "45", "name": "Plumbing & Heating Equipment", "keywords": ["plumbing", "heating", "sanitation", "water heater", "fixtures"]},
    {"prefix": "46", "name": "Water Purification & Sewage", "keywords": ["water purification", "water treatment", "sewage", "wastewater", "filtration", "desalination"]},
    {"prefix": "47", "name": "Pipe & Tubing", "keywords": ["pipe", "tubing", "hose", "fittings", "conduit", "plumbing"]},
    {"prefix": "48", "name": "Valves", "keywords": ["valves", "ball valves", "gate valves", "check valves", "control valves", "actuators"]},
    {"prefix": "49", "name": "Maintenance & Repair Shop Equipment", "keywords": ["maintenance", "repair", "shop equipment", "MRO", "servicing", "overhaul"]},
    {"prefix": "51", "name": "Hand Tools", "keywords": ["hand tools", "wrenches", "hammers", "power tools", "drills", "saws", "cutting"]},
    {"prefix": "52", "name": "Measuring Tools", "keywords": ["measuring", "gauges", "calipers", "precision", "inspection", "calibration"]},
    {"prefix": "53", "name": "Hardware & Abrasives", "keywords": ["fasteners", "screws", "bolts", "nuts", "rivets", "gaskets", "springs", "hardware", "abrasives"]},
    {"prefix": "54", "name": "Prefabricated Structures", "keywords": ["prefabricated", "modular", "shelters", "bridges", "tanks", "scaffolding", "towers"]},
    {"prefix": "55", "name": "Lumber & Wood Products", "keywords": ["lumber", "wood", "timber", "plywood", "millwork"]},
    {"prefix": "56", "name": "Construction Materials", "keywords": ["construction materials", "building materials", "roofing", "insulation", "brick", "concrete", "fencing"]},
    {"prefix": "58", "name": "Communication Equipment", "keywords": ["communication", "radio", "telecommunications", "encryption", "radar", "sonar", "antenna", "electronic warfare"]},
    {"prefix": "59", "name": "Electrical & Electronic Components", "keywords": ["electrical", "electronic", "resistors", "capacitors", "connectors", "circuit boards", "semiconductors", "PCB"]},
    {"prefix": "60", "name": "Fiber Optic Components", "keywords": ["fiber optic", "optical", "photonic", "fiber cable", "optical connectors"]},
    {"prefix": "61", "name": "Electric Power Generation & Distribution", "keywords": ["generators", "motors", "batteries", "solar", "power", "transformers", "electrical power", "wire", "cable"]},
    {"prefix": "62", "name": "Lighting Equipment", "keywords": ["lighting", "lamps", "bulbs", "LED", "fixtures", "flashlights"]},
    {"prefix": "63", "name": "Alarm & Signal Systems", "keywords": ["alarms", "signals", "security", "traffic signals", "warning systems", "detection"]},
    {"prefix": "65", "name": "Medical & Dental Equipment", "keywords": ["medical", "surgical", "dental", "pharmaceutical", "hospital", "healthcare", "diagnostic", "X-ray"]},
    {"prefix": "66", "name": "Instruments & Lab Equipment", "keywords": ["instruments", "laboratory", "test equipment", "measurement", "gauges", "sensors", "analytical"]},
    {"prefix": "67", "name": "Photographic Equipment", "keywords": ["cameras", "photography", "film", "projectors", "photo", "imaging"]},
    {"prefix": "68", "name": "Chemicals", "keywords": ["chemicals", "reagents", "dyes", "gases", "pesticides", "industrial chemicals"]},
    {"prefix": "69", "name": "Training Aids & Devices", "keywords": ["training", "simulators", "education", "training devices"]},
    {"prefix": "70", "name": "ADP Equipment & Software", "keywords": ["computers", "software", "IT", "data processing", "servers", "networking", "hardware", "ADP"]},
    {"prefix": "71", "name": "Furniture", "keywords": ["furniture", "office furniture", "desks", "chairs", "cabinets", "shelving"]},
    {"prefix": "72", "name": "Furnishings & Household Equipment", "keywords": ["furnishings", "carpet", "draperies", "household", "floor coverings"]},
    {"prefix": "73", "name": "Food Preparation Equipment", "keywords": ["kitchen", "cooking", "food service", "cutlery", "tableware", "baking"]},
    {"prefix": "74", "name": "Office Machines", "keywords": ["office machines", "typewriters", "copiers", "calculators", "filing"]},
    {"prefix": "75", "name": "Office Supplies", "keywords": ["office supplies", "stationery", "paper", "forms", "pens"]},
    {"prefix": "76", "name": "Books & Maps", "keywords": ["books", "publications", "maps", "charts", "manuals", "drawings", "specifications"]},
    {"prefix": "77", "name": "Musical Instruments & Entertainment", "keywords": ["musical instruments", "music", "TV", "radio", "entertainment", "records"]},
    {"prefix": "78", "name": "Recreation & Athletic Equipment", "keywords": ["sports", "recreation", "gym", "fitness", "athletic", "games", "toys"]},
    {"prefix": "79", "name": "Cleaning Equipment & Supplies", "keywords": ["cleaning", "janitorial", "vacuums", "brooms", "polishing", "detergents"]},
    {"prefix": "80", "name": "Paints & Adhesives", "keywords": ["paints", "coatings", "varnish", "adhesives", "sealants", "primers"]},
    {"prefix": "81", "name": "Containers & Packaging", "keywords": ["containers", "packaging", "boxes", "bottles", "drums", "shipping"]},
    {"prefix": "83", "name": "Textiles & Leather", "keywords": ["textiles", "fabric", "leather", "yarn", "canvas", "tents", "flags"]},
    {"prefix": "84", "name": "Clothing & Footwear", "keywords": ["clothing", "apparel", "footwear", "boots", "uniforms", "body armor", "protective clothing"]},
    {"prefix": "85", "name": "Toiletries", "keywords": ["toiletries", "soap", "cosmetics", "personal care", "hygiene"]},
    {"prefix": "87", "name": "Agricultural Supplies", "keywords": ["fertilizers", "seeds", "feed", "agricultural", "animal feed", "nursery"]},
    {"prefix": "88", "name": "Live Animals & Food", "keywords": ["livestock", "animals", "food", "meat", "dairy", "produce", "beverages", "rations"]},
    {"prefix": "89", "name": "Food Products", "keywords": ["food", "meat", "dairy", "produce", "bakery", "beverages", "coffee", "rations", "MRE"]},
    {"prefix": "91", "name": "Fuels & Lubricants", "keywords": ["fuel", "petroleum", "diesel", "lubricants", "oil", "grease", "jet fuel"]},
    {"prefix": "93", "name": "Nonmetallic Fabricated Materials", "keywords": ["paper", "rubber", "plastics", "glass", "ceramics", "composite", "refractories"]},
    {"prefix": "94", "name": "Nonmetallic Crude Materials", "keywords": ["fibers", "raw materials", "plant materials", "animal products", "scrap"]},
    {"prefix": "95", "name": "Metal Bars, Sheets & Shapes", "keywords": ["steel", "aluminum", "metal", "sheet metal", "structural steel", "copper", "wire"]},
    {"prefix": "96", "name": "Ores & Metals", "keywords": ["ores", "minerals", "metals", "steel", "iron", "copper", "aluminum", "precious metals", "gold", "silver"]},
    {"prefix": "99", "name": "Miscellaneous", "keywords": ["signs", "jewelry", "collectibles", "religious", "miscellaneous"]},
]


# =============================================================================
# FSC CLASSES
# Product classes with lexical keywords
# =============================================================================

FSC_CODES = [
    # Weapons (10)
    {"code": "1005", "title": "Guns, through 30mm", "keywords": ["rifle", "pistol", "handgun", "machine gun", "small arms", "firearm"]},
    {"code": "1010", "title": "Guns, over 30mm up to 75mm", "keywords": ["autocannon", "grenade launcher", "mortar", "cannon"]},
    {"code": "1015", "title": "Guns, 75mm through 125mm", "keywords": ["howitzer", "artillery", "tank gun"]},
    {"code": "1095", "title": "Miscellaneous Weapons", "keywords": ["bayonet", "flame thrower", "non-lethal weapon", "launcher"]},
    # Fire Control Equipment (12)
    {"code": "1210", "title": "Fire Control Directors", "keywords": ["fire control director", "fire control system", "gun director"]},
    {"code": "1220", "title": "Fire Control Computing Sights and Devices", "keywords": ["ballistic computer", "computing sight", "fire control computer"]},
    {"code": "1240", "title": "Optical Sighting and Ranging Equipment", "keywords": ["rangefinder", "riflescope", "gun sight", "weapon sight", "laser range"]},
    # Guided Missiles (14)
    {"code": "1410", "title": "Guided Missiles", "keywords": ["guided missile", "cruise missile", "interceptor"]},
    {"code": "1420", "title": "Guided Missile Components", "keywords": ["missile component", "seeker", "guidance section", "warhead"]},
    {"code": "1450", "title": "Guided Missile Handling and Servicing Equipment", "keywords": ["missile handling", "missile launcher", "missile test set"]},
    # Aircraft and Airframe Structural Components (15)
    {"code": "1510", "title": "Aircraft, Fixed Wing", "keywords": ["fixed wing", "airplane", "jet aircraft", "cargo aircraft"]},
    {"code": "1520", "title": "Aircraft, Rotary Wing", "keywords": ["helicopter", "rotorcraft", "rotary wing"]},
    {"code": "1550", "title": "Unmanned Aircraft", "keywords": ["drone", "unmanned aircraft", "uav", "unmanned aerial"]},
    {"code": "1560", "title": "Airframe Structural Components", "keywords": ["airframe", "fuselage", "wing spar", "aerostructure", "nacelle"]},
    # Aircraft Components and Accessories (16)
    {"code": "1610", "title": "Aircraft Propellers and Components", "keywords": ["propeller", "prop hub", "propeller blade"]},
    {"code": "1615", "title": "Helicopter Rotor Blades, Drive Mechanisms and Components", "keywords": ["rotor blade", "main rotor", "tail rotor", "helicopter transmission"]},
    {"code": "1620", "title": "Aircraft Landing Gear Components", "keywords": ["landing gear", "shock strut", "nose gear"]},
    {"code": "1630", "title": "Aircraft Wheel and Brake Systems", "keywords": ["aircraft wheel", "aircraft brake", "brake assembly"]},
    {"code": "1650", "title": "Aircraft Hydraulic, Vacuum, and De-icing System Components", "keywords": ["aircraft hydraulic", "de-icing", "deicing", "hydraulic actuator"]},
    {"code": "1680", "title": "Miscellaneous Aircraft Accessories and Components", "keywords": ["aircraft accessories", "aircraft parts", "avionics mount", "aerospace components"]},
    # Aircraft Launching, Landing, and Ground Handling Equipment (17)
    {"code": "1710", "title": "Aircraft Landing Equipment", "keywords": ["arresting gear", "arresting cable", "landing mat"]},
    {"code": "1720", "title": "Aircraft Launching Equipment", "keywords": ["catapult", "launch equipment"]},
    {"code": "1730", "title": "Aircraft Ground Servicing Equipment", "keywords": ["ground support equipment", "aircraft tug", "ground power unit", "aircraft servicing"]},
    {"code": "1740", "title": "Airfield Specialized Trucks and Trailers", "keywords": ["aircraft refueler", "airfield truck", "crash truck"]},
    # Space Vehicles (18)
    {"code": "1810", "title": "Space Vehicles", "keywords": ["spacecraft", "satellite", "space vehicle", "smallsat", "cubesat"]},
    {"code": "1820", "title": "Space Vehicle Components", "keywords": ["satellite component", "solar array", "reaction wheel", "star tracker"]},
    {"code": "1830", "title": "Space Vehicle Remote Control Systems", "keywords": ["telemetry", "ground station", "satellite command"]},
    {"code": "1840", "title": "Space Survival Equipment", "keywords": ["space suit", "life support"]},
    # Ship and Marine Equipment (20)
    {"code": "2010", "title": "Ship and Boat Propulsion Components", "keywords": ["marine propulsion", "propeller shaft", "waterjet", "outboard"]},
    {"code": "2020", "title": "Rigging and Rigging Gear", "keywords": ["rigging", "shackle", "turnbuckle", "block and tackle"]},
    {"code": "2030", "title": "Deck Machinery", "keywords": ["deck machinery", "capstan", "windlass", "mooring winch"]},
    {"code": "2040", "title": "Marine Hardware and Hull Items", "keywords": ["marine hardware", "hull", "cleat", "porthole", "hatch"]},
    {"code": "2050", "title": "Buoys", "keywords": ["buoy", "navigation buoy", "mooring buoy"]},
    {"code": "2090", "title": "Miscellaneous Ship and Marine Equipment", "keywords": ["marine equipment", "ship equipment", "boat equipment", "naval equipment"]},
    # Railway Equipment (22)
    {"code": "2210", "title": "Locomotives", "keywords": ["locomotive"]},
    {"code": "2220", "title": "Rail Cars", "keywords": ["rail car", "railcar", "freight car", "boxcar"]},
    {"code": "2230", "title": "Right-of-Way Construction and Maintenance Equipment, Railroad", "keywords": ["track maintenance", "tie tamper", "ballast regulator"]},
    {"code": "2240", "title": "Locomotive and Rail Car Accessories and Components", "keywords": ["coupler", "bogie", "rail car parts"]},
    {"code": "2250", "title": "Track Materials, Railroad", "keywords": ["rail track", "railroad tie", "track material", "switch frog"]},
    # Ground Effect Vehicles, Motor Vehicles, Trailers, and Cycles (23)
    {"code": "2310", "title": "Passenger Motor Vehicles", "keywords": ["passenger car", "sedan", "bus", "ambulance", "passenger vehicle"]},
    {"code": "2320", "title": "Trucks and Truck Tractors, Wheeled", "keywords": ["truck", "truck tractor", "pickup", "dump truck"]},
    {"code": "2330", "title": "Trailers", "keywords": ["trailer", "semitrailer", "flatbed"]},
    {"code": "2340", "title": "Motorcycles, Motor Scooters, and Bicycles", "keywords": ["motorcycle", "scooter", "bicycle", "e-bike"]},
    {"code": "2350", "title": "Combat, Assault, and Tactical Vehicles, Tracked", "keywords": ["tank", "armored vehicle", "tracked vehicle", "combat vehicle"]},
    # Tractors (24)
    {"code": "2410", "title": "Tractor, Full Tracked, Low Speed", "keywords": ["crawler tractor", "bulldozer", "tracked tractor"]},
    {"code": "2420", "title": "Tractors, Wheeled", "keywords": ["wheeled tractor", "farm tractor", "utility tractor"]},
    # Vehicular Equipment Components (25)
    {"code": "2510", "title": "Vehicular Cab, Body, and Frame Structural Components", "keywords": ["truck body", "vehicle frame", "cab", "chassis"]},
    {"code": "2520", "title": "Vehicular Power Transmission Components", "keywords": ["transmission", "transfer case", "driveshaft", "differential"]},
    {"code": "2530", "title": "Vehicular Brake, Steering, Axle, Wheel, and Track Components", "keywords": ["brake pad", "steering", "axle", "wheel hub", "brakes"]},
    {"code": "2540", "title": "Vehicular Furniture and Accessories", "keywords": ["vehicle seat", "mirror", "windshield wiper", "vehicle accessories"]},
    {"code": "2590", "title": "Miscellaneous Vehicular Components", "keywords": ["vehicle parts", "auto parts", "automotive components"]},
    # Tires and Tubes (26)
    {"code": "2610", "title": "Tires and Tubes, Pneumatic, Except Aircraft", "keywords": ["tire", "tyre", "inner tube"]},
    {"code": "2620", "title": "Tires and Tubes, Pneumatic, Aircraft", "keywords": ["aircraft tire", "aircraft tyre"]},
    {"code": "2630", "title": "Tires, Solid and Cushion", "keywords": ["solid tire", "cushion tire", "forklift tire"]},
    {"code": "2640", "title": "Tire Rebuilding and Tire and Tube Repair Materials", "keywords": ["retread", "tire repair", "tire patch"]},
    # Engines, Turbines, and Components (28)
    {"code": "2805", "title": "Gasoline Reciprocating Engines, Except Aircraft; and Components", "keywords": ["gasoline engine", "small engine", "piston engine"]},
    {"code": "2815", "title": "Diesel Engines and Components", "keywords": ["diesel engine", "diesel"]},
    {"code": "2835", "title": "Gas Turbines and Jet Engines, Non-Aircraft Prime Mover", "keywords": ["gas turbine", "industrial turbine", "turbine generator"]},
    {"code": "2840", "title": "Gas Turbines and Jet Engines, Aircraft, Prime Moving; and Components", "keywords": ["jet engine", "turbofan", "turboprop", "turbine blade"]},
    {"code": "2845", "title": "Rocket Engines and Components", "keywords": ["rocket engine", "rocket motor", "thruster"]},
    # Engine Accessories (29)
    {"code": "2910", "title": "Engine Fuel System Components, Nonaircraft", "keywords": ["fuel injector", "fuel pump", "carburetor", "fuel system"]},
    {"code": "2920", "title": "Engine Electrical System Components, Nonaircraft", "keywords": ["alternator", "starter motor", "ignition", "spark plug"]},
    {"code": "2930", "title": "Engine Cooling System Components, Nonaircraft", "keywords": ["radiator", "water pump", "engine cooling"]},
    {"code": "2940", "title": "Engine Air and Oil Filters, Strainers, and Cleaners, Nonaircraft", "keywords": ["air filter", "oil filter", "strainer"]},
    {"code": "2950", "title": "Turbosuperchargers and Components", "keywords": ["turbocharger", "supercharger", "turbo"]},
    # Mechanical Power Transmission Equipment (30)
    {"code": "3010", "title": "Torque Converters and Speed Changers", "keywords": ["torque converter", "gearbox", "speed reducer", "gear reducer"]},
    {"code": "3020", "title": "Gears, Pulleys, Sprockets, and Transmission Chain", "keywords": ["gear", "pulley", "sprocket", "roller chain"]},
    {"code": "3030", "title": "Belting, Drive Belts, Fan Belts, and Accessories", "keywords": ["drive belt", "v-belt", "timing belt", "belting"]},
    {"code": "3040", "title": "Miscellaneous Power Transmission Equipment", "keywords": ["coupling", "clutch", "shaft", "universal joint"]},
    # Bearings (31)
    {"code": "3110", "title": "Bearings, Antifriction, Unmounted", "keywords": ["ball bearing", "roller bearing", "needle bearing"]},
    {"code": "3120", "title": "Bearings, Plain, Unmounted", "keywords": ["plain bearing", "bushing", "sleeve bearing"]},
    {"code": "3130", "title": "Bearings, Mounted", "keywords": ["pillow block", "flange bearing", "mounted bearing"]},
    # Woodworking Machinery and Equipment (32)
    {"code": "3210", "title": "Sawmill and Planing Mill Machinery", "keywords": ["sawmill", "planer", "log saw"]},
    {"code": "3220", "title": "Woodworking Machines", "keywords": ["woodworking", "router table", "jointer", "wood lathe"]},
    {"code": "3230", "title": "Tools and Attachments for Woodworking Machinery", "keywords": ["router bit", "saw blade", "woodworking tooling"]},
    # Metalworking Machinery (34)
    {"code": "3405", "title": "Saws and Filing Machines", "keywords": ["band saw", "cold saw", "filing machine"]},
    {"code": "3408", "title": "Machining Centers and Way-Type Machines", "keywords": ["machining center", "cnc", "vertical machining", "5-axis"]},
    {"code": "3416", "title": "Lathes", "keywords": ["lathe", "turning center", "cnc turning"]},
    {"code": "3417", "title": "Milling Machines", "keywords": ["milling machine", "mill", "cnc milling"]},
    {"code": "3431", "title": "Electric Arc Welding Equipment", "keywords": ["arc welding", "mig welder", "tig welder", "welding machine"]},
    {"code": "3433", "title": "Gas Welding, Heat Cutting, and Metalizing Equipment", "keywords": ["oxy-fuel", "plasma cutter", "cutting torch", "metalizing"]},
    {"code": "3441", "title": "Bending and Forming Machines", "keywords": ["press brake", "bending machine", "roll forming", "tube bender"]},
    {"code": "3460", "title": "Cutting Tools for Machine Tools", "keywords": ["end mill", "carbide insert", "drill bit", "cutting tool"]},
    # Service and Trade Equipment (35)
    {"code": "3510", "title": "Laundry and Dry Cleaning Equipment", "keywords": ["laundry", "washer extractor", "dry cleaning", "industrial dryer"]},
    {"code": "3530", "title": "Industrial Sewing Machines and Mobile Textile Repair Shops", "keywords": ["sewing machine", "industrial sewing"]},
    {"code": "3540", "title": "Wrapping and Packaging Machinery", "keywords": ["packaging machine", "shrink wrap", "stretch wrapper", "case sealer"]},
    {"code": "3590", "title": "Miscellaneous Service and Trade Equipment", "keywords": ["vending machine", "barber", "commercial equipment"]},
    # Special Industry Machinery (36)
    {"code": "3605", "title": "Food Products Machinery and Equipment", "keywords": ["food processing", "food machinery", "meat grinder", "bottling line"]},
    {"code": "3610", "title": "Printing, Duplicating, and Bookbinding Equipment", "keywords": ["printing press", "printing equipment", "bookbinding"]},
    {"code": "3650", "title": "Chemical and Pharmaceutical Products Manufacturing Machinery", "keywords": ["reactor vessel", "pharmaceutical manufacturing", "tablet press"]},
    {"code": "3670", "title": "Specialized Semiconductor, Microcircuit, and Printed Circuit Board Manufacturing Machinery", "keywords": ["wafer", "lithography", "pick and place", "reflow oven"]},
    {"code": "3695", "title": "Miscellaneous Special Industry Machinery", "keywords": ["injection molding", "extruder", "industrial machinery", "foundry"]},
    # Agricultural Machinery and Equipment (37)
    {"code": "3710", "title": "Soil Preparation Equipment", "keywords": ["plow", "tiller", "harrow", "soil preparation"]},
    {"code": "3720", "title": "Harvesting Equipment", "keywords": ["harvester", "combine", "baler", "mower"]},
    {"code": "3740", "title": "Pest, Disease, and Frost Control Equipment", "keywords": ["sprayer", "fogger", "crop duster"]},
    {"code": "3750", "title": "Gardening Implements and Tools", "keywords": ["garden tool", "shovel", "rake", "pruner", "landscaping"]},
    # Construction, Mining, Excavating, and Highway Maintenance Equipment (38)
    {"code": "3805", "title": "Earth Moving and Excavating Equipment", "keywords": ["excavator", "backhoe", "loader", "grader", "earthmoving"]},
    {"code": "3810", "title": "Cranes", "keywords": ["crane", "mobile crane", "tower crane"]},
    {"code": "3820", "title": "Mining, Rock Drilling, Earth Boring, and Related Equipment", "keywords": ["mining equipment", "rock drill", "drilling rig", "well drilling"]},
    {"code": "3825", "title": "Road Clearing, Cleaning, and Marking Equipment", "keywords": ["snow plow", "street sweeper", "line striper", "road marking"]},
    {"code": "3895", "title": "Miscellaneous Construction Equipment", "keywords": ["concrete mixer", "compactor", "paving", "asphalt"]},
    # Materials Handling Equipment (39)
    {"code": "3910", "title": "Conveyors", "keywords": ["conveyor", "belt conveyor", "roller conveyor"]},
    {"code": "3920", "title": "Material Handling Equipment, Nonself-Propelled", "keywords": ["hand truck", "pallet jack", "dolly", "cart"]},
    {"code": "3930", "title": "Warehouse Trucks and Tractors, Self-Propelled", "keywords": ["forklift", "reach truck", "order picker"]},
    {"code": "3950", "title": "Winches, Hoists, Cranes, and Derricks", "keywords": ["hoist", "winch", "chain hoist", "gantry"]},
    {"code": "3990", "title": "Miscellaneous Materials Handling Equipment", "keywords": ["pallet", "rack", "material handling", "warehouse equipment"]},
    # Rope, Cable, Chain, and Fittings (40)
    {"code": "4010", "title": "Chain and Wire Rope", "keywords": ["wire rope", "chain", "steel cable"]},
    {"code": "4020", "title": "Fiber Rope, Cordage, and Twine", "keywords": ["rope", "cordage", "twine", "paracord"]},
    {"code": "4030", "title": "Fittings for Rope, Cable, and Chain", "keywords": ["wire rope clip", "thimble", "hook", "rope fitting"]},
    # Refrigeration, Air Conditioning, and Air Circulating Equipment (41)
    {"code": "4110", "title": "Refrigeration Equipment", "keywords": ["refrigerator", "freezer", "walk-in cooler", "refrigeration"]},
    {"code": "4120", "title": "Air Conditioning Equipment", "keywords": ["air conditioner", "air conditioning", "hvac", "chiller", "heat pump"]},
    {"code": "4130", "title": "Refrigeration and Air Conditioning Components", "keywords": ["compressor coil", "condenser", "evaporator", "refrigerant"]},
    {"code": "4140", "title": "Fans, Air Circulators, and Blower Equipment", "keywords": ["fan", "blower", "air circulator", "ventilation"]},
    # Fire Fighting, Rescue, and Safety Equipment (42)
    {"code": "4210", "title": "Fire Fighting Equipment", "keywords": ["fire extinguisher", "fire hose", "firefighting", "fire truck", "sprinkler"]},
    {"code": "4220", "title": "Marine Lifesaving and Diving Equipment", "keywords": ["life jacket", "life raft", "diving", "scuba"]},
    {"code": "4230", "title": "Decontaminating and Impregnating Equipment", "keywords": ["decontamination", "cbrn", "hazmat"]},
    {"code": "4240", "title": "Safety and Rescue Equipment", "keywords": ["safety harness", "respirator", "gas mask", "rescue", "fall protection"]},
    # Pumps and Compressors (43)
    {"code": "4310", "title": "Compressors and Vacuum Pumps", "keywords": ["air compressor", "vacuum pump", "compressor"]},
    {"code": "4320", "title": "Power and Hand Pumps", "keywords": ["centrifugal pump", "hydraulic pump", "pump", "diaphragm pump"]},
    {"code": "4330", "title": "Centrifugals, Separators, and Pressure and Vacuum Filters", "keywords": ["centrifuge", "separator", "filter housing", "cyclone"]},
    # Furnace, Steam Plant, and Drying Equipment (44)
    {"code": "4410", "title": "Industrial Boilers", "keywords": ["boiler", "steam generator"]},
    {"code": "4420", "title": "Heat Exchangers and Steam Condensers", "keywords": ["heat exchanger", "steam condenser", "shell and tube"]},
    {"code": "4430", "title": "Industrial Furnaces, Kilns, Lehrs, and Ovens", "keywords": ["furnace", "kiln", "industrial oven", "heat treating"]},
    {"code": "4440", "title": "Driers, Dehydrators, and Anhydrators", "keywords": ["dehumidifier", "desiccant", "dryer", "dehydrator"]},
    {"code": "4460", "title": "Air Purification Equipment", "keywords": ["air purifier", "hepa", "dust collector", "air scrubber"]},
    # Plumbing, Heating, and Waste Disposal Equipment (45)
    {"code": "4510", "title": "Plumbing Fixtures and Accessories", "keywords": ["faucet", "toilet", "sink", "plumbing fixture", "shower"]},
    {"code": "4520", "title": "Space and Water Heating Equipment", "keywords": ["water heater", "space heater", "radiant heater"]},
    {"code": "4530", "title": "Fuel Burning Equipment Units", "keywords": ["burner", "oil burner", "gas burner"]},
    {"code": "4540", "title": "Waste Disposal Equipment", "keywords": ["incinerator", "trash compactor", "waste disposal"]},
    # Water Purification and Sewage Treatment Equipment (46)
    {"code": "4610", "title": "Water Purification Equipment", "keywords": ["water purification", "water filter", "reverse osmosis", "water treatment"]},
    {"code": "4620", "title": "Water Distillation Equipment, Marine and Industrial", "keywords": ["distillation", "desalination", "water still"]},
    {"code": "4630", "title": "Sewage Treatment Equipment", "keywords": ["sewage", "wastewater", "septic", "lift station"]},
    # Pipe, Tubing, Hose, and Fittings (47)
    {"code": "4710", "title": "Pipe, Tube and Rigid Tubing", "keywords": ["steel pipe", "tubing", "pipe", "seamless tube"]},
    {"code": "4720", "title": "Hose and Flexible Tubing", "keywords": ["hose", "flexible tubing", "hydraulic hose"]},
    {"code": "4730", "title": "Hose, Pipe, Tube, Lubrication, and Railing Fittings", "keywords": ["pipe fitting", "flange", "elbow", "coupling nut", "compression fitting"]},
    # Valves (48)
    {"code": "4810", "title": "Valves, Powered", "keywords": ["solenoid valve", "actuated valve", "control valve", "motorized valve"]},
    {"code": "4820", "title": "Valves, Nonpowered", "keywords": ["ball valve", "gate valve", "check valve", "relief valve", "valve"]},
    # Maintenance and Repair Shop Equipment (49)
    {"code": "4910", "title": "Motor Vehicle Maintenance and Repair Shop Specialized Equipment", "keywords": ["vehicle lift", "wheel balancer", "diagnostic scanner", "auto repair"]},
    {"code": "4920", "title": "Aircraft Maintenance and Repair Shop Specialized Equipment", "keywords": ["aircraft maintenance", "engine stand", "aircraft jack"]},
    {"code": "4940", "title": "Miscellaneous Maintenance and Repair Shop Specialized Equipment", "keywords": ["repair shop", "parts washer", "mro", "shop equipment"]},
    # Hand Tools (51)
    {"code": "5110", "title": "Hand Tools, Edged, Nonpowered", "keywords": ["knife", "chisel", "hacksaw", "file", "utility knife"]},
    {"code": "5120", "title": "Hand Tools, Nonedged, Nonpowered", "keywords": ["wrench", "hammer", "screwdriver", "pliers", "socket set"]},
    {"code": "5130", "title": "Hand Tools, Power Driven", "keywords": ["power tool", "cordless drill", "angle grinder", "impact driver"]},
    {"code": "5180", "title": "Sets, Kits, and Outfits of Hand Tools", "keywords": ["tool kit", "tool set", "mechanic set"]},
    # Measuring Tools (52)
    {"code": "5210", "title": "Measuring Tools, Craftsmen's", "keywords": ["tape measure", "level", "square", "ruler"]},
    {"code": "5220", "title": "Inspection Gages and Precision Layout Tools", "keywords": ["gage", "gauge block", "micrometer", "caliper"]},
    {"code": "5280", "title": "Sets, Kits, and Outfits of Measuring Tools", "keywords": ["measuring kit", "inspection kit"]},
    # Hardware and Abrasives (53)
    {"code": "5305", "title": "Screws", "keywords": ["screw", "machine screw", "self-tapping"]},
    {"code": "5306", "title": "Bolts", "keywords": ["bolt", "hex bolt", "anchor bolt"]},
    {"code": "5310", "title": "Nuts and Washers", "keywords": ["nut", "washer", "lock nut"]},
    {"code": "5320", "title": "Rivets", "keywords": ["rivet", "blind rivet"]},
    {"code": "5330", "title": "Packing and Gasket Materials", "keywords": ["gasket", "o-ring", "seal", "packing material"]},
    {"code": "5340", "title": "Hardware, Commercial", "keywords": ["hinge", "latch", "bracket", "door hardware", "hardware"]},
    {"code": "5345", "title": "Disks and Stones, Abrasive", "keywords": ["grinding wheel", "cutoff wheel", "abrasive disc"]},
    {"code": "5350", "title": "Abrasive Materials", "keywords": ["sandpaper", "abrasive", "blasting media"]},
    {"code": "5360", "title": "Coil, Flat, Leaf, and Wire Springs", "keywords": ["spring", "coil spring", "leaf spring"]},
    # Prefabricated Structures and Scaffolding (54)
    {"code": "5410", "title": "Prefabricated and Portable Buildings", "keywords": ["modular building", "portable building", "prefabricated", "shelter"]},
    {"code": "5420", "title": "Bridges, Fixed and Floating", "keywords": ["bridge", "pontoon"]},
    {"code": "5430", "title": "Storage Tanks", "keywords": ["storage tank", "water tank", "fuel tank"]},
    {"code": "5440", "title": "Scaffolding Equipment and Concrete Forms", "keywords": ["scaffolding", "concrete form", "shoring"]},
    {"code": "5450", "title": "Miscellaneous Prefabricated Structures", "keywords": ["tower", "canopy", "grandstand"]},
    # Lumber, Millwork, Plywood, and Veneer (55)
    {"code": "5510", "title": "Lumber and Related Basic Wood Materials", "keywords": ["lumber", "timber", "hardwood", "softwood"]},
    {"code": "5520", "title": "Millwork", "keywords": ["millwork", "molding", "wood door", "window frame"]},
    {"code": "5530", "title": "Plywood and Veneer", "keywords": ["plywood", "veneer", "osb"]},
    # Construction and Building Materials (56)
    {"code": "5610", "title": "Mineral Construction Materials, Bulk", "keywords": ["cement", "concrete", "gravel", "aggregate", "asphalt"]},
    {"code": "5620", "title": "Tile, Brick and Block", "keywords": ["tile", "brick", "concrete block", "masonry"]},
    {"code": "5630", "title": "Pipe and Conduit, Nonmetallic", "keywords": ["pvc pipe", "culvert", "nonmetallic conduit"]},
    {"code": "5640", "title": "Wallboard, Building Paper, and Thermal Insulation Materials", "keywords": ["drywall", "wallboard", "insulation", "gypsum"]},
    {"code": "5650", "title": "Roofing and Siding Materials", "keywords": ["roofing", "shingle", "siding", "membrane roof"]},
    {"code": "5660", "title": "Fencing, Fences, Gates and Components", "keywords": ["fence", "fencing", "gate", "barbed wire"]},
    {"code": "5670", "title": "Architectural and Related Metal Products", "keywords": ["metal door", "railing", "grating", "architectural metal"]},
    {"code": "5680", "title": "Miscellaneous Construction Materials", "keywords": ["building materials", "construction materials", "glazing"]},
    # Communication, Detection, and Coherent Radiation Equipment (58)
    {"code": "5805", "title": "Telephone and Telegraph Equipment", "keywords": ["telephone", "pbx", "voip phone"]},
    {"code": "5810", "title": "Communications Security Equipment and Components", "keywords": ["encryption device", "comsec", "crypto"]},
    {"code": "5820", "title": "Radio and Television Communication Equipment, Except Airborne", "keywords": ["radio", "transceiver", "two-way radio", "transmitter", "broadcast"]},
    {"code": "5821", "title": "Radio and Television Communication Equipment, Airborne", "keywords": ["airborne radio", "avionics radio", "aircraft radio"]},
    {"code": "5840", "title": "Radar Equipment, Except Airborne", "keywords": ["radar", "ground radar", "surveillance radar"]},
    {"code": "5845", "title": "Underwater Sound Equipment", "keywords": ["sonar", "hydrophone", "underwater acoustic"]},
    {"code": "5865", "title": "Electronic Countermeasures, Counter-Countermeasures and Quick Reaction Capability Equipment", "keywords": ["electronic warfare", "jammer", "countermeasure"]},
    {"code": "5895", "title": "Miscellaneous Communication Equipment", "keywords": ["communication equipment", "telecommunications", "intercom"]},
    # Electrical and Electronic Equipment Components (59)
    {"code": "5905", "title": "Resistors", "keywords": ["resistor", "potentiometer", "rheostat"]},
    {"code": "5910", "title": "Capacitors", "keywords": ["capacitor", "supercapacitor"]},
    {"code": "5920", "title": "Fuses, Arrestors, Absorbers, and Protectors", "keywords": ["fuse", "surge protector", "lightning arrestor"]},
    {"code": "5925", "title": "Circuit Breakers", "keywords": ["circuit breaker", "breaker panel"]},
    {"code": "5930", "title": "Switches", "keywords": ["switch", "toggle switch", "limit switch"]},
    {"code": "5935", "title": "Connectors, Electrical", "keywords": ["connector", "electrical connector", "terminal block", "harness connector"]},
    {"code": "5961", "title": "Semiconductor Devices and Associated Hardware", "keywords": ["transistor", "diode", "semiconductor", "thyristor"]},
    {"code": "5962", "title": "Microcircuits, Electronic", "keywords": ["integrated circuit", "microcircuit", "fpga", "microcontroller", "asic"]},
    {"code": "5975", "title": "Electrical Hardware and Supplies", "keywords": ["junction box", "cable tie", "electrical supplies", "conduit fitting"]},
    {"code": "5985", "title": "Antennas, Waveguides, and Related Equipment", "keywords": ["antenna", "waveguide", "rf cable"]},
    {"code": "5998", "title": "Electrical and Electronic Assemblies, Boards, Cards, and Associated Hardware", "keywords": ["circuit board", "pcb", "printed circuit", "circuit card assembly", "pcba"]},
    # Fiber Optics Materials, Components, Assemblies, and Accessories (60)
    {"code": "6010", "title": "Fiber Optic Conductors", "keywords": ["optical fiber", "fiber strand"]},
    {"code": "6015", "title": "Fiber Optic Cables", "keywords": ["fiber optic cable", "fiber cable"]},
    {"code": "6020", "title": "Fiber Optic Cable Assemblies and Harnesses", "keywords": ["fiber patch cord", "fiber assembly", "fiber harness"]},
    {"code": "6060", "title": "Fiber Optic Interconnectors", "keywords": ["fiber optic connector", "optical connector", "fiber splice"]},
    # Electric Wire, and Power and Distribution Equipment (61)
    {"code": "6105", "title": "Motors, Electrical", "keywords": ["electric motor", "servo motor", "stepper motor", "ac motor"]},
    {"code": "6115", "title": "Generators and Generator Sets, Electrical", "keywords": ["generator", "genset", "generator set"]},
    {"code": "6117", "title": "Solar Electric Power Systems", "keywords": ["solar panel", "photovoltaic", "solar power", "solar inverter"]},
    {"code": "6120", "title": "Transformers: Distribution and Power Station", "keywords": ["transformer", "substation", "distribution transformer"]},
    {"code": "6130", "title": "Converters, Electrical", "keywords": ["power converter", "inverter", "power supply", "rectifier"]},
    {"code": "6135", "title": "Batteries, Nonrechargeable", "keywords": ["primary battery", "alkaline battery", "lithium primary"]},
    {"code": "6140", "title": "Batteries, Rechargeable", "keywords": ["rechargeable battery", "lithium-ion", "battery pack", "lead acid"]},
    {"code": "6145", "title": "Wire and Cable, Electrical", "keywords": ["electrical wire", "power cable", "copper wire", "wire harness"]},
    {"code": "6150", "title": "Miscellaneous Electric Power and Distribution Equipment", "keywords": ["switchgear", "power distribution", "busbar"]},
    # Lighting Fixtures and Lamps (62)
    {"code": "6210", "title": "Indoor and Outdoor Electric Lighting Fixtures", "keywords": ["light fixture", "luminaire", "street light", "floodlight"]},
    {"code": "6220", "title": "Electric Vehicular Lights and Fixtures", "keywords": ["headlight", "tail light", "vehicle light", "light bar"]},
    {"code": "6230", "title": "Electric Portable and Hand Lighting Equipment", "keywords": ["flashlight", "headlamp", "work light", "lantern"]},
    {"code": "6240", "title": "Electric Lamps", "keywords": ["light bulb", "lamp", "led bulb", "fluorescent tube"]},
    {"code": "6250", "title": "Ballasts, Lampholders, and Starters", "keywords": ["ballast", "lampholder", "led driver"]},
    # Alarm, Signal, and Security Detection Systems (63)
    {"code": "6310", "title": "Traffic and Transit Signal Systems", "keywords": ["traffic signal", "traffic light", "railroad crossing"]},
    {"code": "6340", "title": "Aircraft Alarm and Signal Systems", "keywords": ["cockpit warning", "aircraft alarm"]},
    {"code": "6350", "title": "Miscellaneous Alarm, Signal, and Security Detection Systems", "keywords": ["intrusion detection", "security camera", "access control", "burglar alarm", "fire alarm"]},
    # Medical, Dental, and Veterinary Equipment and Supplies (65)
    {"code": "6505", "title": "Drugs and Biologicals", "keywords": ["drug", "vaccine", "pharmaceutical", "medication", "biologic"]},
    {"code": "6510", "title": "Surgical Dressing Materials", "keywords": ["bandage", "gauze", "wound dressing"]},
    {"code": "6515", "title": "Medical and Surgical Instruments, Equipment, and Supplies", "keywords": ["surgical instrument", "medical device", "catheter", "syringe", "patient monitor"]},
    {"code": "6520", "title": "Dental Instruments, Equipment, and Supplies", "keywords": ["dental", "orthodontic", "dental chair"]},
    {"code": "6525", "title": "Imaging Equipment and Supplies: Medical, Dental, Veterinary", "keywords": ["x-ray", "ultrasound", "mri", "medical imaging"]},
    {"code": "6530", "title": "Hospital Furniture, Equipment, Utensils, and Supplies", "keywords": ["hospital bed", "stretcher", "wheelchair"]},
    {"code": "6532", "title": "Hospital and Surgical Clothing and Related Special Purpose Items", "keywords": ["surgical gown", "scrubs", "surgical mask"]},
    {"code": "6540", "title": "Ophthalmic Instruments, Equipment, and Supplies", "keywords": ["ophthalmic", "eyeglasses", "contact lens"]},
    {"code": "6545", "title": "Replenishable Field Medical Sets, Kits, and Outfits", "keywords": ["first aid kit", "trauma kit", "medical kit"]},
    # Instruments and Laboratory Equipment (66)
    {"code": "6605", "title": "Navigational Instruments", "keywords": ["gps receiver", "compass", "navigation system", "inertial navigation"]},
    {"code": "6625", "title": "Electrical and Electronic Properties Measuring and Testing Instruments", "keywords": ["oscilloscope", "multimeter", "spectrum analyzer", "signal generator"]},
    {"code": "6630", "title": "Chemical Analysis Instruments", "keywords": ["spectrometer", "chromatograph", "ph meter", "gas analyzer"]},
    {"code": "6640", "title": "Laboratory Equipment and Supplies", "keywords": ["laboratory", "lab equipment", "beaker", "pipette", "fume hood"]},
    {"code": "6650", "title": "Optical Instruments, Test Equipment, Components and Accessories", "keywords": ["binoculars", "microscope", "optical lens", "night vision"]},
    {"code": "6665", "title": "Hazard-Detecting Instruments and Apparatus", "keywords": ["gas detector", "radiation detector", "dosimeter", "smoke detector"]},
    {"code": "6680", "title": "Liquid and Gas Flow, Liquid Level, and Mechanical Motion Measuring Instruments", "keywords": ["flow meter", "level sensor", "tachometer"]},
    {"code": "6685", "title": "Pressure, Temperature, and Humidity Measuring and Controlling Instruments", "keywords": ["pressure gauge", "thermometer", "thermostat", "humidity sensor", "pressure transducer"]},
    # Photographic Equipment (67)
    {"code": "6710", "title": "Cameras, Motion Picture", "keywords": ["video camera", "cinema camera", "camcorder"]},
    {"code": "6720", "title": "Cameras, Still Picture", "keywords": ["digital camera", "still camera", "dslr"]},
    {"code": "6730", "title": "Photographic Projection Equipment", "keywords": ["projector", "projection screen"]},
    {"code": "6760", "title": "Photographic Equipment and Accessories", "keywords": ["tripod", "camera lens", "photographic"]},
    # Chemicals and Chemical Products (68)
    {"code": "6810", "title": "Chemicals", "keywords": ["chemical", "solvent", "acid", "reagent"]},
    {"code": "6820", "title": "Dyes", "keywords": ["dye", "pigment", "colorant"]},
    {"code": "6830", "title": "Gases: Compressed and Liquefied", "keywords": ["compressed gas", "nitrogen", "oxygen", "argon", "industrial gas"]},
    {"code": "6840", "title": "Pest Control Agents and Disinfectants", "keywords": ["pesticide", "insecticide", "disinfectant", "herbicide"]},
    {"code": "6850", "title": "Miscellaneous Chemical Specialties", "keywords": ["antifreeze", "deicer", "chemical specialty", "corrosion inhibitor"]},
    # Training Aids and Devices (69)
    {"code": "6910", "title": "Training Aids", "keywords": ["training aid", "mannequin", "cutaway model"]},
    {"code": "6920", "title": "Armament Training Devices", "keywords": ["target", "training round", "firearms training"]},
    {"code": "6930", "title": "Operation Training Devices", "keywords": ["simulator", "flight simulator", "driving simulator"]},
    {"code": "6940", "title": "Communication Training Devices", "keywords": ["communication trainer", "radio trainer"]},
    # ADP Equipment, Software, Supplies, and Support Equipment (70)
    {"code": "7010", "title": "ADPE System Configuration", "keywords": ["computer system", "workstation", "server"]},
    {"code": "7025", "title": "ADP Input/Output and Storage Devices", "keywords": ["printer", "monitor", "keyboard", "storage array", "hard drive"]},
    {"code": "7030", "title": "ADP Software", "keywords": ["software", "saas", "software license", "application"]},
    {"code": "7035", "title": "ADP Support Equipment", "keywords": ["ups", "server rack", "kvm"]},
    {"code": "7050", "title": "ADP Components", "keywords": ["network switch", "router", "memory module", "network card"]},
    # Furniture (71)
    {"code": "7105", "title": "Household Furniture", "keywords": ["sofa", "bed frame", "dresser", "household furniture"]},
    {"code": "7110", "title": "Office Furniture", "keywords": ["office furniture", "desk", "office chair", "workstation furniture"]},
    {"code": "7125", "title": "Cabinets, Lockers, Bins, and Shelving", "keywords": ["cabinet", "locker", "shelving", "storage bin"]},
    {"code": "7195", "title": "Miscellaneous Furniture and Fixtures", "keywords": ["furniture", "display fixture", "podium"]},
    # Household and Commercial Furnishings and Appliances (72)
    {"code": "7210", "title": "Household Furnishings", "keywords": ["mattress", "bedding", "pillow", "blanket"]},
    {"code": "7220", "title": "Floor Coverings", "keywords": ["carpet", "rug", "floor mat", "vinyl flooring"]},
    {"code": "7230", "title": "Draperies, Awnings, and Shades", "keywords": ["drapery", "curtain", "awning", "window blind"]},
    {"code": "7290", "title": "Miscellaneous Household and Commercial Furnishings and Appliances", "keywords": ["appliance", "washing machine", "household appliance"]},
    # Food Preparation and Serving Equipment (73)
    {"code": "7310", "title": "Food Cooking, Baking, and Serving Equipment", "keywords": ["commercial oven", "fryer", "griddle", "steam table"]},
    {"code": "7320", "title": "Kitchen Equipment and Appliances", "keywords": ["mixer", "dishwasher", "food slicer", "kitchen equipment"]},
    {"code": "7330", "title": "Kitchen Hand Tools and Utensils", "keywords": ["utensil", "ladle", "spatula", "cookware"]},
    {"code": "7340", "title": "Cutlery and Flatware", "keywords": ["cutlery", "flatware", "fork", "spoon"]},
    {"code": "7350", "title": "Tableware", "keywords": ["tableware", "dinnerware", "plate", "glassware"]},
    # Office Machines, Text Processing Systems and Visible Record Equipment (74)
    {"code": "7420", "title": "Accounting and Calculating Machines", "keywords": ["calculator", "cash register", "adding machine"]},
    {"code": "7430", "title": "Typewriters and Office Type Composing Machines", "keywords": ["typewriter", "label maker"]},
    {"code": "7450", "title": "Office Type Sound Recording and Reproducing Machines", "keywords": ["dictation", "voice recorder"]},
    {"code": "7490", "title": "Miscellaneous Office Machines", "keywords": ["shredder", "laminator", "copier", "binding machine"]},
    # Office Supplies and Devices (75)
    {"code": "7510", "title": "Office Supplies", "keywords": ["office supplies", "pen", "pencil", "paper clip", "toner"]},
    {"code": "7520", "title": "Office Devices and Accessories", "keywords": ["stapler", "tape dispenser", "desk organizer", "hole punch"]},
    {"code": "7530", "title": "Stationery and Record Forms", "keywords": ["stationery", "envelope", "notebook", "copy paper"]},
    {"code": "7540", "title": "Standard Forms", "keywords": ["standard form", "printed form"]},
    # Books, Maps, and Other Publications (76)
    {"code": "7610", "title": "Books and Pamphlets", "keywords": ["book", "pamphlet", "publication"]},
    {"code": "7630", "title": "Newspapers and Periodicals", "keywords": ["newspaper", "magazine", "periodical", "journal subscription"]},
    {"code": "7640", "title": "Maps, Atlases, Charts, and Globes", "keywords": ["map", "atlas", "nautical chart", "globe"]},
    {"code": "7650", "title": "Drawings and Specifications", "keywords": ["technical drawing", "blueprint", "specification"]},
    {"code": "7690", "title": "Miscellaneous Printed Matter", "keywords": ["printed matter", "poster", "label", "brochure"]},
    # Musical Instruments, Phonographs, and Home-Type Radios (77)
    {"code": "7710", "title": "Musical Instruments", "keywords": ["musical instrument", "guitar", "piano", "drum"]},
    {"code": "7720", "title": "Musical Instrument Parts and Accessories", "keywords": ["guitar string", "drumstick", "instrument case"]},
    {"code": "7730", "title": "Phonographs, Radios, and Television Sets: Home Type", "keywords": ["television", "home audio", "speaker system"]},
    {"code": "7735", "title": "Parts and Accessories of Phonographs, Radio and Television Sets", "keywords": ["tv mount", "remote control"]},
    # Recreational and Athletic Equipment (78)
    {"code": "7810", "title": "Athletic and Sporting Equipment", "keywords": ["sporting goods", "athletic equipment", "ball", "racket"]},
    {"code": "7820", "title": "Games, Toys, and Wheeled Goods", "keywords": ["toy", "board game", "puzzle"]},
    {"code": "7830", "title": "Recreational and Gymnastic Equipment", "keywords": ["gym equipment", "treadmill", "fitness equipment", "playground"]},
    # Cleaning Equipment and Supplies (79)
    {"code": "7910", "title": "Floor Polishers and Vacuum Cleaners", "keywords": ["vacuum cleaner", "floor polisher", "floor scrubber"]},
    {"code": "7920", "title": "Brooms, Brushes, Mops, and Sponges", "keywords": ["broom", "mop", "sponge", "brush"]},
    {"code": "7930", "title": "Cleaning and Polishing Compounds and Preparations", "keywords": ["detergent", "cleaner", "polish", "degreaser", "janitorial"]},
    # Brushes, Paints, Sealers, and Adhesives (80)
    {"code": "8010", "title": "Paints, Dopes, Varnishes, and Related Products", "keywords": ["paint", "varnish", "primer", "coating", "lacquer"]},
    {"code": "8020", "title": "Paint and Artists' Brushes", "keywords": ["paint brush", "paint roller", "artist brush"]},
    {"code": "8030", "title": "Preservative and Sealing Compounds", "keywords": ["sealant", "caulk", "sealing compound", "corrosion preventive"]},
    {"code": "8040", "title": "Adhesives", "keywords": ["adhesive", "glue", "epoxy", "bonding agent"]},
    # Containers, Packaging, and Packing Supplies (81)
    {"code": "8105", "title": "Bags and Sacks", "keywords": ["bag", "sack", "poly bag", "tote"]},
    {"code": "8110", "title": "Drums and Cans", "keywords": ["drum", "steel drum", "can", "pail"]},
    {"code": "8115", "title": "Boxes, Cartons, and Crates", "keywords": ["corrugated box", "carton", "crate", "shipping box"]},
    {"code": "8120", "title": "Commercial and Industrial Gas Cylinders", "keywords": ["gas cylinder", "cylinder valve", "pressure vessel"]},
    {"code": "8125", "title": "Bottles and Jars", "keywords": ["bottle", "jar", "vial"]},
    {"code": "8135", "title": "Packaging and Packing Bulk Materials", "keywords": ["bubble wrap", "packing material", "stretch film", "packaging material"]},
    {"code": "8145", "title": "Specialized Shipping and Storage Containers", "keywords": ["shipping container", "transit case", "rugged case", "intermodal"]},
    # Textiles, Leather, Furs, Apparel and Shoe Findings, Tents and Flags (83)
    {"code": "8305", "title": "Textile Fabrics", "keywords": ["fabric", "textile", "woven", "nonwoven", "canvas"]},
    {"code": "8310", "title": "Yarn and Thread", "keywords": ["yarn", "thread", "sewing thread"]},
    {"code": "8330", "title": "Leather", "keywords": ["leather", "hide"]},
    {"code": "8340", "title": "Tents and Tarpaulins", "keywords": ["tent", "tarp", "tarpaulin"]},
    {"code": "8345", "title": "Flags and Pennants", "keywords": ["flag", "pennant", "banner"]},
    # Clothing, Individual Equipment, and Insignia (84)
    {"code": "8405", "title": "Outerwear, Men's", "keywords": ["jacket", "coat", "parka"]},
    {"code": "8415", "title": "Clothing, Special Purpose", "keywords": ["protective clothing", "coverall", "flame resistant", "high visibility"]},
    {"code": "8430", "title": "Footwear, Men's", "keywords": ["boots", "footwear", "work boot", "shoe"]},
    {"code": "8440", "title": "Hosiery, Handwear, and Clothing Accessories, Men's", "keywords": ["gloves", "socks", "belt"]},
    {"code": "8465", "title": "Individual Equipment", "keywords": ["backpack", "rucksack", "canteen", "load carrying"]},
    {"code": "8470", "title": "Armor, Personal", "keywords": ["body armor", "ballistic vest", "helmet", "armor plate"]},
    # Toiletries (85)
    {"code": "8510", "title": "Perfumes, Toilet Preparations, and Powders", "keywords": ["cosmetic", "lotion", "perfume", "sunscreen"]},
    {"code": "8520", "title": "Toilet Soap, Shaving Preparations, and Dentifrices", "keywords": ["soap", "shaving cream", "toothpaste", "hand sanitizer"]},
    {"code": "8530", "title": "Personal Toiletry Articles", "keywords": ["toothbrush", "razor", "comb"]},
    {"code": "8540", "title": "Toiletry Paper Products", "keywords": ["toilet paper", "paper towel", "facial tissue"]},
    # Agricultural Supplies (87)
    {"code": "8710", "title": "Forage and Feed", "keywords": ["animal feed", "forage", "hay"]},
    {"code": "8720", "title": "Fertilizers", "keywords": ["fertilizer", "compost", "soil amendment"]},
    {"code": "8730", "title": "Seeds and Nursery Stock", "keywords": ["seed", "nursery stock", "seedling", "sod"]},
    # Live Animals (88)
    {"code": "8810", "title": "Live Animals, Raised for Food", "keywords": ["cattle", "poultry", "livestock"]},
    {"code": "8820", "title": "Live Animals, Not Raised for Food", "keywords": ["working dog", "horse", "laboratory animal"]},
    # Subsistence (89)
    {"code": "8905", "title": "Meat, Poultry, and Fish", "keywords": ["meat", "poultry", "seafood", "beef"]},
    {"code": "8910", "title": "Dairy Foods and Eggs", "keywords": ["dairy", "cheese", "milk", "eggs"]},
    {"code": "8915", "title": "Fruits and Vegetables", "keywords": ["fruit", "vegetable", "produce"]},
    {"code": "8920", "title": "Bakery and Cereal Products", "keywords": ["bakery", "bread", "cereal", "flour"]},
    {"code": "8940", "title": "Special Dietary Foods and Food Specialty Preparations", "keywords": ["nutritional supplement", "protein bar", "dietary"]},
    {"code": "8955", "title": "Coffee, Tea, and Cocoa", "keywords": ["coffee", "tea", "cocoa"]},
    {"code": "8960", "title": "Beverages, Nonalcoholic", "keywords": ["beverage", "bottled water", "juice", "soft drink"]},
    {"code": "8970", "title": "Composite Food Packages", "keywords": ["meal ready to eat", "mre", "ration", "meal kit"]},
    # Fuels, Lubricants, Oils, and Waxes (91)
    {"code": "9110", "title": "Fuels, Solid", "keywords": ["coal", "charcoal", "wood pellet"]},
    {"code": "9130", "title": "Liquid Propellants and Fuels, Petroleum Base", "keywords": ["gasoline", "jet fuel", "aviation fuel", "petroleum"]},
    {"code": "9140", "title": "Fuel Oils", "keywords": ["fuel oil", "heating oil", "diesel fuel"]},
    {"code": "9150", "title": "Oils and Greases: Cutting, Lubricating, and Hydraulic", "keywords": ["lubricant", "grease", "hydraulic fluid", "motor oil", "cutting oil"]},
    # Nonmetallic Fabricated Materials (93)
    {"code": "9310", "title": "Paper and Paperboard", "keywords": ["paperboard", "kraft paper", "cardboard"]},
    {"code": "9320", "title": "Rubber Fabricated Materials", "keywords": ["rubber sheet", "rubber", "elastomer"]},
    {"code": "9330", "title": "Plastics Fabricated Materials", "keywords": ["plastic sheet", "acrylic", "polycarbonate", "plastic film"]},
    {"code": "9340", "title": "Glass Fabricated Materials", "keywords": ["glass", "tempered glass", "glass sheet"]},
    {"code": "9350", "title": "Refractories and Fire Surfacing Materials", "keywords": ["refractory", "firebrick", "ceramic fiber"]},
    {"code": "9390", "title": "Miscellaneous Fabricated Nonmetallic Materials", "keywords": ["composite", "carbon fiber", "fiberglass", "ceramic"]},
    # Nonmetallic Crude Materials (94)
    {"code": "9410", "title": "Crude Grades of Plant Materials", "keywords": ["plant material", "cotton bale", "raw wood"]},
    {"code": "9420", "title": "Fibers: Vegetable, Animal, and Synthetic", "keywords": ["synthetic fiber", "natural fiber", "wool fiber"]},
    {"code": "9430", "title": "Miscellaneous Crude Animal Products, Inedible", "keywords": ["animal hair", "feathers", "bone meal"]},
    {"code": "9450", "title": "Nonmetallic Scrap, Except Textile", "keywords": ["scrap plastic", "scrap rubber", "scrap paper", "recycled material"]},
    # Metal Bars, Sheets, and Shapes (95)
    {"code": "9505", "title": "Wire, Nonelectrical", "keywords": ["steel wire", "music wire", "welding wire"]},
    {"code": "9510", "title": "Bars and Rods", "keywords": ["bar stock", "steel rod", "round bar"]},
    {"code": "9515", "title": "Plate, Sheet, Strip, Foil, and Leaf", "keywords": ["sheet metal", "steel plate", "aluminum sheet", "foil"]},
    {"code": "9520", "title": "Structural Shapes", "keywords": ["structural steel", "i-beam", "angle iron", "channel"]},
    {"code": "9530", "title": "Nonferrous Base Metal Refinery and Intermediate Forms", "keywords": ["copper ingot", "aluminum billet", "nonferrous"]},
    # Ores, Minerals, and Their Primary Products (96)
    {"code": "9610", "title": "Ores", "keywords": ["ore", "iron ore", "bauxite"]},
    {"code": "9620", "title": "Minerals, Natural and Synthetic", "keywords": ["mineral", "graphite", "silica", "industrial mineral"]},
    {"code": "9630", "title": "Additive Metal Materials", "keywords": ["ferroalloy", "master alloy", "alloying"]},
    {"code": "9640", "title": "Iron and Steel Primary and Semifinished Products", "keywords": ["steel billet", "pig iron", "steel slab"]},
    {"code": "9660", "title": "Precious Metals Primary Forms", "keywords": ["gold", "silver", "platinum", "precious metal"]},
    # Miscellaneous (99)
    {"code": "9905", "title": "Signs, Advertising Displays, and Identification Plates", "keywords": ["sign", "signage", "nameplate", "display"]},
    {"code": "9915", "title": "Collectors' and/or Historical Items", "keywords": ["collectible", "memorabilia", "historical item"]},
    {"code": "9925", "title": "Ecclesiastical Equipment, Furnishings, and Supplies", "keywords": ["ecclesiastical", "chapel", "religious"]},
    {"code": "9930", "title": "Memorials; Cemeterial and Mortuary Equipment and Supplies", "keywords": ["headstone", "casket", "mortuary"]},
    {"code": "9999", "title": "Miscellaneous Items", "keywords": ["miscellaneous"]},
]


def get_fsc_taxonomy() -> list[dict]:
    """
    Return the built-in FSC taxonomy as a flat list of dicts.

    Each dict has:
    - code: 4-character FSC class code
    - title: class title
    - keywords: lexical keywords for the class
    """
    return [
        {"code": c["code"], "title": c["title"], "keywords": list(c["keywords"])}
        for c in FSC_CODES
    ]


def build_group_text(group: Group) -> str:
    """Text embedded for a group vector."""
    return f"Group {group.prefix}: {group.name}. Related: {', '.join(group.keywords)}"


class TaxonomyStore:
    """Read-only view over the FSC classes and their groups.

    Construction validates the data and raises TaxonomyError on duplicate codes,
    codes shorter than a group prefix, or empty titles.
    """

    def __init__(
        self,
        categories: Iterable[Category],
        group_catalogue: Optional[Iterable[Group]] = None,
    ) -> None:
        self._categories: list[Category] = list(categories)
        self._by_code: dict[str, Category] = {}

        for category in self._categories:
            if len(category.code) != 4:
                raise TaxonomyError(f"FSC code {category.code!r} is not 4 characters")
            if category.code in self._by_code:
                raise TaxonomyError(f"Duplicate FSC code: {category.code}")
            if not category.title.strip():
                raise TaxonomyError(f"FSC code {category.code} has an empty title")
            self._by_code[category.code] = category

        catalogue = {g.prefix: g for g in (group_catalogue or [])}
        self._groups: dict[str, Group] = {}
        for category in self._categories:
            prefix = category.group_prefix
            if prefix not in self._groups:
                self._groups[prefix] = catalogue.get(prefix) or Group(prefix=prefix, name=f"Group {prefix}")

    def __len__(self) -> int:
        return len(self._categories)

    def all_categories(self) -> list[Category]:
        return list(self._categories)

    def categories_in_groups(self, prefixes: Iterable[str]) -> list[Category]:
        wanted = set(prefixes)
        return [c for c in self._categories if c.group_prefix in wanted]

    def category_by_code(self, code: str) -> Optional[Category]:
        return self._by_code.get(code)

    def groups(self) -> list[Group]:
        return list(self._groups.values())

    def group_by_prefix(self, prefix: str) -> Optional[Group]:
        return self._groups.get(prefix)

    def keyword_data(self) -> dict:
        """Keywords-data JSON payload: {"keywords": {code: [...]}, "titles": {code: title}}."""
        return {
            "keywords": {c.code: list(c.keywords) for c in self._categories},
            "titles": {c.code: c.title for c in self._categories},
        }


def _default_groups() -> list[Group]:
    return [Group(prefix=g["prefix"], name=g["name"], keywords=tuple(g["keywords"])) for g in FSC_GROUPS]


def _categories_from_records(records: Iterable[dict]) -> list[Category]:
    return [
        Category(code=str(r["code"]).strip(), title=str(r["title"]).strip(), keywords=tuple(r.get("keywords") or ()))
        for r in records
    ]


def load_default_taxonomy() -> TaxonomyStore:
    return TaxonomyStore(_categories_from_records(get_fsc_taxonomy()), _default_groups())


def load_taxonomy_json(path: Path) -> TaxonomyStore:
    """Load a keywords-data JSON file ({"keywords": ..., "titles": ...})."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        keywords: dict = data["keywords"]
        titles: dict = data["titles"]
    except (OSError, ValueError, KeyError, TypeError) as e:
        raise TaxonomyError(f"Could not read keywords data from {path}: {e}") from e

    records = [
        {"code": code, "title": titles.get(code, ""), "keywords": kws}
        for code, kws in keywords.items()
    ]
    # Codes with a title but no keyword entry still belong to the taxonomy
    records.extend(
        {"code": code, "title": title, "keywords": []}
        for code, title in titles.items()
        if code not in keywords
    )
    return TaxonomyStore(_categories_from_records(records), _default_groups())


def load_taxonomy_csv(path: Path) -> TaxonomyStore:
    """Load a CSV with columns code,title,keywords (keywords separated by ';')."""
    if not path.exists():
        raise TaxonomyError(f"Missing taxonomy file: {path}")
    df = pd.read_csv(path, dtype=str).fillna("")
    missing = {"code", "title"} - set(df.columns)
    if missing:
        raise TaxonomyError(f"Taxonomy CSV {path} is missing columns: {sorted(missing)}")

    records = []
    for _, row in df.iterrows():
        raw_keywords = row.get("keywords", "")
        keywords = [k.strip() for k in str(raw_keywords).split(";") if k.strip()]
        records.append({"code": row["code"], "title": row["title"], "keywords": keywords})
    return TaxonomyStore(_categories_from_records(records), _default_groups())


def load_taxonomy(path: Optional[str | Path] = None) -> TaxonomyStore:
    """Load the taxonomy from a JSON/CSV file, or the built-in data when no path is given."""
    if path is None:
        store = load_default_taxonomy()
    else:
        path = Path(path)
        if path.suffix.lower() == ".csv":
            store = load_taxonomy_csv(path)
        else:
            store = load_taxonomy_json(path)
    logger.info(f"Loaded FSC taxonomy: {len(store)} codes in {len(store.groups())} groups")
    return store


def export_keywords(store: TaxonomyStore, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(store.keyword_data(), ensure_ascii=False), encoding="utf-8")
    return output_path


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect or export the FSC taxonomy.")
    parser.add_argument("--source", type=str, default=None, help="Taxonomy JSON/CSV to load (default: built-in)")
    parser.add_argument("--export", type=str, default=None, help="Write keywords-data JSON to this path")
    args = parser.parse_args()

    store = load_taxonomy(args.source)

    if args.export:
        out_path = export_keywords(store, Path(args.export))
        print(f"Wrote keywords data to: {out_path}")

    print(f"  Groups: {len(store.groups())}")
    print(f"  Codes: {len(store)}")
    print(f"  Keywords: {sum(len(c.keywords) for c in store.all_categories())}")


if __name__ == "__main__":
    main()
