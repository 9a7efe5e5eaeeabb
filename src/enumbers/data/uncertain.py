UNCERTAIN_ENUMBERS = {
    "E161b": {
        "name": "Lutein",
        "description": "Gul färg som oftast utvinns ur tagetesblommor men även kan komma från äggula."
    },
    "E322": {
        "name": "Lecitiner",
        "description": "Emulgeringsmedel som oftast framställs av soja eller solros men även kan komma från ägg."
    },
    "E422": {
        "name": "Glycerol",
        "description": "Fuktbevarande medel som kan framställas av vegetabiliska oljor eller av animaliskt fett."
    },
    "E430": {
        "name": "Polyoxietylen(8)stearat",
        "description": "Emulgeringsmedel baserat på stearinsyra, som kan vara av vegetabiliskt eller animaliskt ursprung."
    },
    "E431": {
        "name": "Polyoxietylen(40)stearat",
        "description": "Emulgeringsmedel baserat på stearinsyra, som kan vara av vegetabiliskt eller animaliskt ursprung."
    },
    "E432": {
        "name": "Polysorbat 20",
        "description": "Emulgeringsmedel där fettsyrorna kan komma från både växt- och djurfett."
    },
    "E433": {
        "name": "Polysorbat 80",
        "description": "Emulgeringsmedel där fettsyrorna kan komma från både växt- och djurfett."
    },
    "E434": {
        "name": "Polysorbat 40",
        "description": "Emulgeringsmedel där fettsyrorna kan komma från både växt- och djurfett."
    },
    "E435": {
        "name": "Polysorbat 60",
        "description": "Emulgeringsmedel där fettsyrorna kan komma från både växt- och djurfett."
    },
    "E436": {
        "name": "Polysorbat 65",
        "description": "Emulgeringsmedel där fettsyrorna kan komma från både växt- och djurfett."
    },
    "E470a": {
        "name": "Natrium-, kalium- och kalciumsalter av fettsyror",
        "description": "Fettsyrasalter som kan framställas av vegetabiliskt eller animaliskt fett."
    },
    "E470b": {
        "name": "Magnesiumsalter av fettsyror",
        "description": "Fettsyrasalter som kan framställas av vegetabiliskt eller animaliskt fett."
    },
    "E471": {
        "name": "Mono- och diglycerider av fettsyror",
        "description": "Vanligt emulgeringsmedel som kan framställas av både vegetabiliskt och animaliskt fett."
    },
    "E472a": {
        "name": "Ättiksyraestrar av mono- och diglycerider av fettsyror",
        "description": "Emulgeringsmedel som kan framställas av både vegetabiliskt och animaliskt fett."
    },
    "E472b": {
        "name": "Mjölksyraestrar av mono- och diglycerider av fettsyror",
        "description": "Emulgeringsmedel som kan framställas av både vegetabiliskt och animaliskt fett."
    },
    "E472c": {
        "name": "Citronsyraestrar av mono- och diglycerider av fettsyror",
        "description": "Emulgeringsmedel som kan framställas av både vegetabiliskt och animaliskt fett."
    },
    "E472d": {
        "name": "Vinsyraestrar av mono- och diglycerider av fettsyror",
        "description": "Emulgeringsmedel som kan framställas av både vegetabiliskt och animaliskt fett."
    },
    "E472e": {
        "name": "Mono- och diacetylvinsyraestrar av mono- och diglycerider av fettsyror",
        "description": "Emulgeringsmedel som kan framställas av både vegetabiliskt och animaliskt fett."
    },
    "E472f": {
        "name": "Blandade ättik- och vinsyraestrar av mono- och diglycerider av fettsyror",
        "description": "Emulgeringsmedel som kan framställas av både vegetabiliskt och animaliskt fett."
    },
    "E473": {
        "name": "Sackarosestrar av fettsyror",
        "description": "Emulgeringsmedel där fettsyrorna kan ha animaliskt ursprung."
    },
    "E474": {
        "name": "Sackarosglycerider",
        "description": "Emulgeringsmedel där fettsyrorna kan ha animaliskt ursprung."
    },
    "E475": {
        "name": "Polyglycerolestrar av fettsyror",
        "description": "Emulgeringsmedel där fettsyrorna kan ha animaliskt ursprung."
    },
    "E477": {
        "name": "Propan-1,2-diolestrar av fettsyror",
        "description": "Emulgeringsmedel där fettsyrorna kan ha animaliskt ursprung."
    },
    "E479b": {
        "name": "Termiskt oxiderad sojaolja med mono- och diglycerider",
        "description": "Sojaolja som reagerats med mono- och diglycerider, vars fettsyror kan vara animaliska."
    },
    "E481": {
        "name": "Natriumstearoyl-2-laktylat",
        "description": "Emulgeringsmedel baserat på stearinsyra och mjölksyra, stearinsyran kan vara animalisk."
    },
    "E482": {
        "name": "Kalciumstearoyl-2-laktylat",
        "description": "Emulgeringsmedel baserat på stearinsyra och mjölksyra, stearinsyran kan vara animalisk."
    },
    "E483": {
        "name": "Stearyltartrat",
        "description": "Emulgeringsmedel baserat på stearylalkohol som kan ha animaliskt ursprung."
    },
    "E491": {
        "name": "Sorbitanmonostearat",
        "description": "Emulgeringsmedel där stearinsyran kan komma från djurfett."
    },
    "E492": {
        "name": "Sorbitantristearat",
        "description": "Emulgeringsmedel där stearinsyran kan komma från djurfett."
    },
    "E493": {
        "name": "Sorbitanmonolaurat",
        "description": "Emulgeringsmedel där fettsyran kan komma från djurfett."
    },
    "E494": {
        "name": "Sorbitanmonooleat",
        "description": "Emulgeringsmedel där fettsyran kan komma från djurfett."
    },
    "E495": {
        "name": "Sorbitanmonopalmitat",
        "description": "Emulgeringsmedel där fettsyran kan komma från djurfett."
    },
    "E570": {
        "name": "Stearinsyra",
        "description": "Fettsyra som kan utvinnas ur vegetabiliska oljor eller animaliskt fett."
    },
    "E572": {
        "name": "Magnesiumstearat",
        "description": "Klumpförebyggande medel baserat på stearinsyra som kan vara animalisk."
    },
    "E626": {
        "name": "Guanylsyra",
        "description": "Smakförstärkare som kan framställas av jäst men även av fisk eller kött."
    },
    "E627": {
        "name": "Dinatriumguanylat",
        "description": "Smakförstärkare som kan framställas av jäst men även av fisk eller kött."
    },
    "E628": {
        "name": "Dikaliumguanylat",
        "description": "Smakförstärkare som kan framställas av jäst men även av fisk eller kött."
    },
    "E629": {
        "name": "Kalciumguanylat",
        "description": "Smakförstärkare som kan framställas av jäst men även av fisk eller kött."
    },
    "E630": {
        "name": "Inosinsyra",
        "description": "Smakförstärkare som ofta framställs av kött eller fisk, men även kan jäsas fram."
    },
    "E631": {
        "name": "Dinatriuminosinat",
        "description": "Smakförstärkare som ofta framställs av kött eller fisk, men även kan jäsas fram."
    },
    "E632": {
        "name": "Dikaliuminosinat",
        "description": "Smakförstärkare som ofta framställs av kött eller fisk, men även kan jäsas fram."
    },
    "E633": {
        "name": "Kalciuminosinat",
        "description": "Smakförstärkare som ofta framställs av kött eller fisk, men även kan jäsas fram."
    },
    "E634": {
        "name": "Kalcium-5'-ribonukleotider",
        "description": "Blandning av guanylat och inosinat som kan ha animaliskt ursprung."
    },
    "E635": {
        "name": "Dinatrium-5'-ribonukleotider",
        "description": "Blandning av guanylat och inosinat som kan ha animaliskt ursprung."
    },
    "E640": {
        "name": "Glycin och dess natriumsalt",
        "description": "Aminosyra som kan framställas syntetiskt eller av gelatin."
    },
    "E910": {
        "name": "Vaxestrar",
        "description": "Ytbehandlingsmedel som kan framställas av vegetabiliska vaxer eller av lanolin och valrav."
    },
    "E921": {
        "name": "L-cystin",
        "description": "Aminosyra som kan framställas av hår och fjädrar men även genom jäsning."
    },
    "E1518": {
        "name": "Glyceryltriacetat (triacetin)",
        "description": "Bärarämne framställt av glycerol, som kan ha animaliskt ursprung."
    },
}
