VEGAN_COLOURS = {
    "E100": {
        "name": "Kurkumin",
        "description": "Gul färg som utvinns ur gurkmejarot."
    },
    "E101": {
        "name": "Riboflavin",
        "description": "Gul färg och vitamin B2, framställs genom jäsning eller syntetiskt."
    },
    "E101a": {
        "name": "Riboflavin-5'-fosfat",
        "description": "Vattenlöslig form av riboflavin, framställs syntetiskt."
    },
    "E102": {
        "name": "Tartrazin",
        "description": "Syntetisk gul azofärg."
    },
    "E104": {
        "name": "Kinolingult",
        "description": "Syntetisk gul färg."
    },
    "E110": {
        "name": "Paraorange",
        "description": "Syntetisk orange azofärg."
    },
    "E122": {
        "name": "Azorubin",
        "description": "Syntetisk röd azofärg."
    },
    "E123": {
        "name": "Amarant",
        "description": "Syntetisk röd azofärg."
    },
    "E124": {
        "name": "Ponceaurött 4R",
        "description": "Syntetisk röd azofärg."
    },
    "E127": {
        "name": "Erytrosin",
        "description": "Syntetisk rosa färg som innehåller jod."
    },
    "E129": {
        "name": "Allurarött AC",
        "description": "Syntetisk röd azofärg."
    },
    "E131": {
        "name": "Patentblått V",
        "description": "Syntetisk blå färg."
    },
    "E132": {
        "name": "Indigotin",
        "description": "Syntetisk blå färg, samma ämne som i indigo."
    },
    "E133": {
        "name": "Briljantblått FCF",
        "description": "Syntetisk blå färg."
    },
    "E140": {
        "name": "Klorofyller och klorofylliner",
        "description": "Grön färg som utvinns ur gröna växter som nässlor och alfalfa."
    },
    "E141": {
        "name": "Kopparkomplex av klorofyller",
        "description": "Stabiliserad grön färg framställd av klorofyll."
    },
    "E142": {
        "name": "Grönt S",
        "description": "Syntetisk grön färg."
    },
    "E150a": {
        "name": "Sockerkulör",
        "description": "Brun färg som framställs genom upphettning av socker."
    },
    "E150b": {
        "name": "Kaustiksulfitsockerkulör",
        "description": "Brun färg som framställs av socker med sulfitföreningar."
    },
    "E150c": {
        "name": "Ammoniaksockerkulör",
        "description": "Brun färg som framställs av socker med ammoniumföreningar."
    },
    "E150d": {
        "name": "Ammoniaksulfitsockerkulör",
        "description": "Brun färg som framställs av socker med ammonium- och sulfitföreningar."
    },
    "E151": {
        "name": "Briljantsvart BN",
        "description": "Syntetisk svart azofärg."
    },
    "E153": {
        "name": "Vegetabiliskt kol",
        "description": "Svart färg som framställs genom förkolning av växtmaterial."
    },
    "E155": {
        "name": "Brunt HT",
        "description": "Syntetisk brun azofärg."
    },
    "E160a": {
        "name": "Karotener",
        "description": "Orange färg från morötter, alger eller syntetisk framställning."
    },
    "E160b": {
        "name": "Annatto, bixin, norbixin",
        "description": "Orange färg som utvinns ur fröna från annattobusken."
    },
    "E160c": {
        "name": "Paprikaextrakt",
        "description": "Röd-orange färg som utvinns ur paprika."
    },
    "E160d": {
        "name": "Lykopen",
        "description": "Röd färg som utvinns ur tomater eller framställs genom jäsning."
    },
    "E160e": {
        "name": "Beta-apo-8'-karotenal",
        "description": "Orange färg som framställs syntetiskt."
    },
    "E160f": {
        "name": "Etylester av beta-apo-8'-karotensyra",
        "description": "Orange färg som framställs syntetiskt."
    },
    "E161g": {
        "name": "Kantaxantin",
        "description": "Röd-orange färg som framställs syntetiskt."
    },
    "E162": {
        "name": "Rödbetsrött, betanin",
        "description": "Röd färg som utvinns ur rödbetor."
    },
    "E163": {
        "name": "Antocyaner",
        "description": "Röd till blå färg från bär, druvor och rödkål."
    },
    "E170": {
        "name": "Kalciumkarbonat",
        "description": "Vit mineralfärg och surhetsreglerande medel från kalksten."
    },
    "E171": {
        "name": "Titandioxid",
        "description": "Vit mineralfärg."
    },
    "E172": {
        "name": "Järnoxider och järnhydroxider",
        "description": "Gul, röd och svart mineralfärg."
    },
    "E173": {
        "name": "Aluminium",
        "description": "Silverfärgad metall som används till dekorationer."
    },
    "E174": {
        "name": "Silver",
        "description": "Metall som används till dekorationer på bakverk och konfektyr."
    },
    "E175": {
        "name": "Guld",
        "description": "Metall som används till dekorationer på bakverk och konfektyr."
    },
    "E180": {
        "name": "Litolrubin BK",
        "description": "Syntetisk röd färg som används på ostkanter."
    },
}
