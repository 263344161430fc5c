"""Fixed vocabularies used by operations

Operation types, sectors, completion types, parties and main events mirror the
lists the field crews pick from.
"""

from enum import Enum


class OperationType(str, Enum):
    PUMP = "PUMP"
    NPT_DT = "NPT/DT"
    NP = "NP"
    OFF_PAD = "Off Pad"


class Sector(str, Enum):
    PAD = "PAD"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    BACKSIDE = "BackSide"
    FRONTSIDE = "FrontSide"
    HP = "HP"
    WELLHEAD = "WellHead"
    LPI = "LPI"
    WIRELINE = "WireLine"


# PAD operations end, and are ended by, operations in any sector
PAD_SECTOR = Sector.PAD.value


class CompletionType(str, Enum):
    DUAL = "Dual"
    SYNC = "Sync"
    ZIPPER_1_WL = "Zipper - 1 WL log"
    ZIPPER_2_WL = "Zipper - 2 WL log"
    SLEEVE = "Sleeve"
    SINGLE = "Single"
    REFRAC = "ReFrac"
    INJECTOR = "Injector"


class PersonnelRole(str, Enum):
    ENGINEER = "engineer"
    PUMP_OPERATOR = "pump_operator"
    SUPERVISOR = "supervisor"
    CUSTOMER_REP = "customer_rep"


PARTY_TYPES = (
    "3rd Party",
    "3rd Party Chem",
    "3rd Party Engineer",
    "3rd Party LOS",
    "BackSide",
    "BallDropper",
    "Coil",
    "Customer",
    "Flowback",
    "Fuel",
    "LandOwner",
    "LOS",
    "LOS - WL",
    "LPI",
    "Nitrogen",
    "Other",
    "Screen out",
    "Severe Weather",
    "Water Heaters",
    "WaterTransfer",
    "WellHead",
    "WireLine",
    "Zipper",
)

MAIN_EVENTS = (
    "3rd Party Wait",
    "Accumulator",
    "Acid Issues",
    "Acid Soak",
    "Baby Beast",
    "Backside",
    "Ball Drop",
    "Ball Dropper",
    "Ball Fall",
    "Ball Issues",
    "Ball Pump Down",
    "Ball Search",
    "Ball Seat",
    "Blender",
    "Blender Swap",
    "Boost Pump",
    "Bucket Test",
    "Burst Disc",
    "Chemical Equipment",
    "Chemicals",
    "Christmas Party",
    "Coil Cleanout Sand",
    "Coil Mill Plug",
    "Coil Other",
    "Coil Shifting Sleeves",
    "Coil TCP",
    "Coil Wellbore Issue",
    "Coil WireLine Issue",
    "Combo Unit",
    "Computer Issues",
    "Crew Swap",
    "Customer Data",
    "Customer Delay",
    "Customer Equipment Issue",
    "Customer Off Location",
    "Customer Other",
    "Customer Personnel",
    "Data Van",
    "Designed Shutdown",
    "digiFrac",
    "digiPrime",
    "Dry Gel Unit",
    "eBlender",
    "eBlender Swap",
    "ECM",
    "Equalizing",
    "Equipment Inspection",
    "Equipment Swap",
    "Flowback",
    "Flowback Prep",
    "Fluid End Maintenance",
    "Fluid Testing",
    "Flush After Screen Out",
    "Forklift",
    "Frac",
    "Frac Prep",
    "FracCat",
    "FracMaxx",
    "Fuel",
    "Fuel - CNG",
    "Fuel - Diesel",
    "Fuel - Field Gas",
    "Generator",
    "Grease 3rd Party Valves",
    "Grease LOS Valves",
    "HCR Valve Related",
    "Heating Water",
    "Hesitation",
    "High Winds",
    "Hydration Issues",
    "Hydration Unit",
    "Injection Test",
    "Inspecting Well",
    "Iron",
    "Iron - Monoline",
    "Iron Restraints",
    "LABS",
    "Leak - High Pressure Hose",
    "Leak - High Pressure Iron",
    "Leak - Low Pressure Hose",
    "Leak - Low Pressure Joint",
    "Leak - Low Pressure Manifold",
    "LOS Misc",
    "Low Rate Well Swap",
    "LTM",
    "Mantis Belts",
    "MegaPOD",
    "MegaPOD Swap",
    "Missile",
    "Nitrogen",
    "Nitrogen Equipment",
    "No Job Scheduled",
    "Offset Well",
    "PCM",
    "PCM (Dry FR)",
    "PCM (Dry Guar)",
    "PCM (Dual Bin)",
    "PDS",
    "Pop Offs - Electric",
    "Pop Offs - Mechanical",
    "Pop Offs - Nitrogen",
    "Pressure Decline Analysis",
    "Pressure Test",
    "Prime UP",
    "Process Trailer",
    "Process Trailer Swap",
    "Proppant Equipment",
    "Proppant Quality",
    "Proppant Sand Chiefs",
    "Proppant Scorpion",
    "Proppant Silos",
    "Proppant Trucking",
    "Pump Down",
    "Pump Mechanical Maintenance",
    "Pump Other",
    "Pump Sanded Off",
    "Pump Swap",
    "Pump Wireless Communication",
    "QAQC",
    "Reboot Equipment",
    "Rig Down",
    "Rig Over",
    "Rig Up",
    "Rock Catcher",
    "Safety Meeting",
    "Safety Shutdown",
    "Screen out",
    "Sector Close",
    "Sector Not Utilized",
    "Set Backside",
    "Set Pop Offs",
    "Sound Wall",
    "SuperPOD",
    "SuperPOD Swap",
    "Sweep",
    "T-belt",
    "Toe Prep",
    "Transducer",
    "Trip to New Pad",
    "Waiting on Customer",
    "Waiting on Next Pad",
    "Water Heater",
    "Water Quantity",
    "Water Transfer Equipment",
    "Weather",
    "Well Open/Close",
    "Well Prep",
    "Well Swap (FracLock)",
    "Well Swap (Zippering)",
    "Wellbore Issues",
    "Wellhead",
    "Wellhead Leak",
    "Wellhead Replacement",
    "Winterizing Equipment",
    "Wireline",
    "WL Ball Issues",
    "WL Crane",
    "WL Drop Ball",
    "WL Dummy Run",
    "WL End of Well Activity",
    "WL Issues",
    "WL Log",
    "WL Miss-Run",
    "WL POOH",
    "WL Prep",
    "WL Pressure Test",
    "WL Regen Logger",
    "WL Re-Head",
    "WL Rigging Down",
    "WL Rigging Up",
    "WL RIH",
    "WL Run",
    "WL SetPlug",
    "WL Spool",
    "WL Stuck",
    "WL Turn Around",
    "Yard Maintenance",
    "Zipper Manifold",
)
