VEGAN_THICKENERS = {
    "E400": {
        "name": "Alginsyra",
        "description": "Förtjockningsmedel som utvinns ur brunalger."
    },
    "E401": {
        "name": "Natriumalginat",
        "description": "Natriumsalt av alginsyra från brunalger."
    },
    "E402": {
        "name": "Kaliumalginat",
        "description": "Kaliumsalt av alginsyra från brunalger."
    },
    "E403": {
        "name": "Ammoniumalginat",
        "description": "Ammoniumsalt av alginsyra från brunalger."
    },
    "E404": {
        "name": "Kalciumalginat",
        "description": "Kalciumsalt av alginsyra från brunalger."
    },
    "E405": {
        "name": "Propylenglykolalginat",
        "description": "Förtjockningsmedel framställt av alginsyra."
    },
    "E406": {
        "name": "Agar",
        "description": "Geléringsmedel som utvinns ur rödalger. Vanligt veganskt alternativ till gelatin."
    },
    "E407": {
        "name": "Karragenan",
        "description": "Förtjockningsmedel som utvinns ur rödalger."
    },
    "E407a": {
        "name": "Bearbetad eucheuma-alg",
        "description": "Förtjockningsmedel av rödalgen eucheuma."
    },
    "E410": {
        "name": "Johannesbrödkärnmjöl",
        "description": "Förtjockningsmedel som mals av fröna från johannesbrödträdet."
    },
    "E412": {
        "name": "Guarkärnmjöl",
        "description": "Förtjockningsmedel som mals av guarbönor."
    },
    "E413": {
        "name": "Dragant",
        "description": "Växtgummi från buskar av släktet Astragalus."
    },
    "E414": {
        "name": "Gummi arabicum",
        "description": "Växtgummi från akaciaträd."
    },
    "E415": {
        "name": "Xantangummi",
        "description": "Förtjockningsmedel som framställs genom bakteriell jäsning av socker."
    },
    "E416": {
        "name": "Karayagummi",
        "description": "Växtgummi från träd av släktet Sterculia."
    },
    "E417": {
        "name": "Taragummi",
        "description": "Förtjockningsmedel som mals av frön från tarabusken."
    },
    "E418": {
        "name": "Gellangummi",
        "description": "Geléringsmedel som framställs genom bakteriell jäsning."
    },
    "E420": {
        "name": "Sorbitoler",
        "description": "Sockeralkohol som framställs av glukos."
    },
    "E421": {
        "name": "Mannitol",
        "description": "Sockeralkohol som framställs av socker eller utvinns ur alger."
    },
    "E425": {
        "name": "Konjak",
        "description": "Förtjockningsmedel från konjakrot."
    },
    "E426": {
        "name": "Sojabönshemicellulosa",
        "description": "Stabiliseringsmedel som utvinns ur sojabönsfiber."
    },
    "E427": {
        "name": "Kassiagummi",
        "description": "Förtjockningsmedel som mals av frön från kassiaträdet."
    },
    "E440": {
        "name": "Pektiner",
        "description": "Geléringsmedel som utvinns ur citrusskal och äppelpressrester."
    },
    "E442": {
        "name": "Ammoniumfosfatider",
        "description": "Emulgeringsmedel som framställs av rapsolja."
    },
    "E444": {
        "name": "Sackarosacetatisobutyrat",
        "description": "Syntetiskt stabiliseringsmedel för drycker."
    },
    "E445": {
        "name": "Glycerolestrar av trähartser",
        "description": "Stabiliseringsmedel som framställs av harts från tallstubbar."
    },
    "E450": {
        "name": "Difosfater",
        "description": "Mineraliska salter som används som bakpulver och stabiliseringsmedel."
    },
    "E451": {
        "name": "Trifosfater",
        "description": "Mineraliska salter av fosforsyra."
    },
    "E452": {
        "name": "Polyfosfater",
        "description": "Mineraliska salter av fosforsyra."
    },
    "E459": {
        "name": "Beta-cyklodextrin",
        "description": "Bärarämne som framställs av stärkelse med hjälp av enzymer."
    },
    "E460": {
        "name": "Cellulosa",
        "description": "Växtfiber som framställs av trä eller bomull."
    },
    "E461": {
        "name": "Metylcellulosa",
        "description": "Förtjockningsmedel framställt av växtcellulosa."
    },
    "E462": {
        "name": "Etylcellulosa",
        "description": "Förtjockningsmedel framställt av växtcellulosa."
    },
    "E463": {
        "name": "Hydroxipropylcellulosa",
        "description": "Förtjockningsmedel framställt av växtcellulosa."
    },
    "E464": {
        "name": "Hydroxipropylmetylcellulosa",
        "description": "Förtjockningsmedel framställt av växtcellulosa, vanligt i vegetariska kapslar."
    },
    "E465": {
        "name": "Etylmetylcellulosa",
        "description": "Förtjockningsmedel framställt av växtcellulosa."
    },
    "E466": {
        "name": "Karboximetylcellulosa",
        "description": "Förtjockningsmedel framställt av växtcellulosa."
    },
    "E468": {
        "name": "Tvärbunden natriumkarboximetylcellulosa",
        "description": "Förtjockningsmedel framställt av växtcellulosa."
    },
    "E469": {
        "name": "Enzymatiskt hydrolyserad karboximetylcellulosa",
        "description": "Förtjockningsmedel framställt av växtcellulosa."
    },
    "E476": {
        "name": "Polyglycerolpolyricinoleat",
        "description": "Emulgeringsmedel som framställs av ricinolja, vanligt i choklad."
    },
}
