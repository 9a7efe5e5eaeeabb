NON_VEGAN_ENUMBERS = {
    "E120": {
        "name": "Karmin",
        "description": "Röd färg som utvinns ur krossade koschenillsköldlöss."
    },
    "E441": {
        "name": "Gelatin",
        "description": "Geléringsmedel som framställs av kollagen från djurhud och ben."
    },
    "E542": {
        "name": "Benfosfat",
        "description": "Kalciumfosfat som framställs av djurben. Används som klumpförebyggande medel."
    },
    "E901": {
        "name": "Bivax",
        "description": "Vax som produceras av honungsbin. Används som ytbehandlingsmedel på godis och frukt."
    },
    "E904": {
        "name": "Schellack",
        "description": "Harts som utsöndras av lacksköldlöss. Används för att ge blank yta på godis och piller."
    },
    "E913": {
        "name": "Lanolin",
        "description": "Ullfett som utvinns ur fårull. Används bland annat som källa till vitamin D3."
    },
    "E920": {
        "name": "L-cystein",
        "description": "Aminosyra som oftast framställs av fjädrar eller svinborst. Används som mjölbehandlingsmedel."
    },
    "E966": {
        "name": "Laktitol",
        "description": "Sockeralkohol som framställs av laktos från mjölk."
    },
    "E1000": {
        "name": "Cholsyra",
        "description": "Gallsyra som utvinns ur galla från nötkreatur. Används som emulgeringsmedel."
    },
    "E1105": {
        "name": "Lysozym",
        "description": "Enzym som utvinns ur äggvita. Används som konserveringsmedel i ost."
    },
}
