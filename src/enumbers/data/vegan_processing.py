VEGAN_PROCESSING = {
    "E500": {
        "name": "Natriumkarbonater",
        "description": "Bland annat bikarbonat. Används som bakpulver och surhetsreglerande medel."
    },
    "E501": {
        "name": "Kaliumkarbonater",
        "description": "Surhetsreglerande medel av mineraliskt ursprung."
    },
    "E503": {
        "name": "Ammoniumkarbonater",
        "description": "Bland annat hjorthornssalt. Används som jäsmedel."
    },
    "E504": {
        "name": "Magnesiumkarbonater",
        "description": "Surhetsreglerande och klumpförebyggande medel av mineraliskt ursprung."
    },
    "E507": {
        "name": "Saltsyra",
        "description": "Syra som används vid framställning av andra livsmedelsingredienser."
    },
    "E508": {
        "name": "Kaliumklorid",
        "description": "Mineralsalt som används som saltersättning."
    },
    "E509": {
        "name": "Kalciumklorid",
        "description": "Mineralsalt som används som stelningsmedel, bland annat vid tillverkning av tofu."
    },
    "E511": {
        "name": "Magnesiumklorid",
        "description": "Mineralsalt (nigari) som används som stelningsmedel för tofu."
    },
    "E512": {
        "name": "Tenn(II)klorid",
        "description": "Antioxidationsmedel av mineraliskt ursprung."
    },
    "E513": {
        "name": "Svavelsyra",
        "description": "Syra som används vid framställning av andra livsmedelsingredienser."
    },
    "E514": {
        "name": "Natriumsulfater",
        "description": "Mineralsalter av svavelsyra."
    },
    "E515": {
        "name": "Kaliumsulfater",
        "description": "Mineralsalter av svavelsyra."
    },
    "E516": {
        "name": "Kalciumsulfat",
        "description": "Mineralsalt (gips) som används som stelningsmedel för tofu."
    },
    "E517": {
        "name": "Ammoniumsulfat",
        "description": "Mineralsalt som används som mjölbehandlingsmedel."
    },
    "E520": {
        "name": "Aluminiumsulfat",
        "description": "Mineralsalt som används som stabiliseringsmedel."
    },
    "E521": {
        "name": "Aluminiumnatriumsulfat",
        "description": "Mineralsalt som används som stabiliseringsmedel."
    },
    "E522": {
        "name": "Aluminiumkaliumsulfat",
        "description": "Mineralsalt (alun) som används som stabiliseringsmedel."
    },
    "E523": {
        "name": "Aluminiumammoniumsulfat",
        "description": "Mineralsalt som används som stabiliseringsmedel."
    },
    "E524": {
        "name": "Natriumhydroxid",
        "description": "Lut som används bland annat vid tillverkning av lutfisk och kringlor."
    },
    "E525": {
        "name": "Kaliumhydroxid",
        "description": "Stark bas som används som surhetsreglerande medel."
    },
    "E526": {
        "name": "Kalciumhydroxid",
        "description": "Släckt kalk. Används som surhetsreglerande medel."
    },
    "E527": {
        "name": "Ammoniumhydroxid",
        "description": "Bas som används som surhetsreglerande medel."
    },
    "E528": {
        "name": "Magnesiumhydroxid",
        "description": "Bas av mineraliskt ursprung."
    },
    "E529": {
        "name": "Kalciumoxid",
        "description": "Bränd kalk. Används som surhetsreglerande medel."
    },
    "E530": {
        "name": "Magnesiumoxid",
        "description": "Klumpförebyggande medel av mineraliskt ursprung."
    },
    "E535": {
        "name": "Natriumferrocyanid",
        "description": "Klumpförebyggande medel i salt."
    },
    "E536": {
        "name": "Kaliumferrocyanid",
        "description": "Klumpförebyggande medel i salt."
    },
    "E538": {
        "name": "Kalciumferrocyanid",
        "description": "Klumpförebyggande medel i salt."
    },
    "E541": {
        "name": "Sur natriumaluminiumfosfat",
        "description": "Mineraliskt bakpulver."
    },
    "E551": {
        "name": "Kiseldioxid",
        "description": "Klumpförebyggande medel av mineraliskt ursprung."
    },
    "E552": {
        "name": "Kalciumsilikat",
        "description": "Klumpförebyggande medel av mineraliskt ursprung."
    },
    "E553a": {
        "name": "Magnesiumsilikat",
        "description": "Klumpförebyggande medel av mineraliskt ursprung."
    },
    "E553b": {
        "name": "Talk",
        "description": "Mineral som används som klumpförebyggande medel och ytbehandlingsmedel."
    },
    "E554": {
        "name": "Natriumaluminiumsilikat",
        "description": "Klumpförebyggande medel av mineraliskt ursprung."
    },
    "E555": {
        "name": "Kaliumaluminiumsilikat",
        "description": "Mineral (glimmer) som används som bärare för pärlemorfärger."
    },
    "E556": {
        "name": "Kalciumaluminiumsilikat",
        "description": "Klumpförebyggande medel av mineraliskt ursprung."
    },
    "E558": {
        "name": "Bentonit",
        "description": "Lermineral som används som klarningsmedel."
    },
    "E559": {
        "name": "Aluminiumsilikat (kaolin)",
        "description": "Lermineral som används som klumpförebyggande medel."
    },
    "E574": {
        "name": "Glukonsyra",
        "description": "Syra som framställs genom jäsning av glukos."
    },
    "E575": {
        "name": "Glukono-delta-lakton",
        "description": "Surhetsreglerande medel som framställs av glukos, används för att stelna tofu."
    },
    "E576": {
        "name": "Natriumglukonat",
        "description": "Natriumsalt av glukonsyra."
    },
    "E577": {
        "name": "Kaliumglukonat",
        "description": "Kaliumsalt av glukonsyra."
    },
    "E578": {
        "name": "Kalciumglukonat",
        "description": "Kalciumsalt av glukonsyra."
    },
    "E579": {
        "name": "Järnglukonat",
        "description": "Järnsalt av glukonsyra. Används för att stabilisera färgen i svarta oliver."
    },
    "E585": {
        "name": "Järnlaktat",
        "description": "Järnsalt av mjölksyra. Innehåller inte mjölk."
    },
    "E586": {
        "name": "4-hexylresorcinol",
        "description": "Syntetiskt antioxidationsmedel som hindrar missfärgning av skaldjur."
    },
    "E620": {
        "name": "Glutaminsyra",
        "description": "Smakförstärkare som framställs genom bakteriell jäsning."
    },
    "E621": {
        "name": "Mononatriumglutamat",
        "description": "Smakförstärkare (MSG) som framställs genom bakteriell jäsning."
    },
    "E622": {
        "name": "Monokaliumglutamat",
        "description": "Smakförstärkare som framställs genom bakteriell jäsning."
    },
    "E623": {
        "name": "Kalciumdiglutamat",
        "description": "Smakförstärkare som framställs genom bakteriell jäsning."
    },
    "E624": {
        "name": "Monoammoniumglutamat",
        "description": "Smakförstärkare som framställs genom bakteriell jäsning."
    },
    "E625": {
        "name": "Magnesiumdiglutamat",
        "description": "Smakförstärkare som framställs genom bakteriell jäsning."
    },
    "E650": {
        "name": "Zinkacetat",
        "description": "Smakförstärkare i tuggummi, framställs syntetiskt."
    },
    "E900": {
        "name": "Dimetylpolysiloxan",
        "description": "Syntetiskt skumdämpande medel."
    },
    "E902": {
        "name": "Kandelillavax",
        "description": "Växtvax från kandelillabusken."
    },
    "E903": {
        "name": "Karnaubavax",
        "description": "Växtvax från bladen på karnaubapalmen. Veganskt alternativ till bivax."
    },
    "E905": {
        "name": "Mikrokristallint vax",
        "description": "Vax som framställs av petroleum."
    },
    "E907": {
        "name": "Hydrerat poly-1-decen",
        "description": "Syntetiskt ytbehandlingsmedel."
    },
    "E914": {
        "name": "Oxiderat polyetenvax",
        "description": "Syntetiskt ytbehandlingsmedel för citrusfrukter."
    },
    "E927b": {
        "name": "Karbamid",
        "description": "Syntetiskt framställd urea som används i tuggummi."
    },
    "E938": {
        "name": "Argon",
        "description": "Ädelgas som används som förpackningsgas."
    },
    "E939": {
        "name": "Helium",
        "description": "Ädelgas som används som förpackningsgas."
    },
    "E941": {
        "name": "Kväve",
        "description": "Gas som används som förpackningsgas."
    },
    "E942": {
        "name": "Dikväveoxid",
        "description": "Lustgas som används som drivgas i sprayburkar med grädde."
    },
    "E943a": {
        "name": "Butan",
        "description": "Drivgas av petroleumursprung."
    },
    "E943b": {
        "name": "Isobutan",
        "description": "Drivgas av petroleumursprung."
    },
    "E944": {
        "name": "Propan",
        "description": "Drivgas av petroleumursprung."
    },
    "E948": {
        "name": "Syre",
        "description": "Gas som används som förpackningsgas."
    },
    "E949": {
        "name": "Väte",
        "description": "Gas som används som förpackningsgas."
    },
    "E950": {
        "name": "Acesulfam K",
        "description": "Syntetiskt sötningsmedel."
    },
    "E951": {
        "name": "Aspartam",
        "description": "Syntetiskt sötningsmedel."
    },
    "E952": {
        "name": "Cyklamat",
        "description": "Syntetiskt sötningsmedel."
    },
    "E953": {
        "name": "Isomalt",
        "description": "Sockeralkohol som framställs av betsocker."
    },
    "E954": {
        "name": "Sackarin",
        "description": "Syntetiskt sötningsmedel."
    },
    "E955": {
        "name": "Sukralos",
        "description": "Sötningsmedel som framställs av socker."
    },
    "E957": {
        "name": "Taumatin",
        "description": "Sött protein som utvinns ur katemfefrukten."
    },
    "E959": {
        "name": "Neohesperidin DC",
        "description": "Sötningsmedel som framställs av ämnen i bittra apelsiner."
    },
    "E960": {
        "name": "Steviolglykosider",
        "description": "Sötningsmedel som utvinns ur steviaplantan."
    },
    "E961": {
        "name": "Neotam",
        "description": "Syntetiskt sötningsmedel."
    },
    "E962": {
        "name": "Aspartam-acesulfamsalt",
        "description": "Syntetiskt sötningsmedel."
    },
    "E964": {
        "name": "Polyglycitolsirap",
        "description": "Sockeralkohol som framställs av stärkelse."
    },
    "E965": {
        "name": "Maltitol",
        "description": "Sockeralkohol som framställs av stärkelse."
    },
    "E967": {
        "name": "Xylitol",
        "description": "Sockeralkohol som framställs av björkved eller majskolvar."
    },
    "E968": {
        "name": "Erytritol",
        "description": "Sockeralkohol som framställs genom jäsning av glukos."
    },
    "E969": {
        "name": "Advantam",
        "description": "Syntetiskt sötningsmedel."
    },
    "E999": {
        "name": "Kvillajaextrakt",
        "description": "Skumbildande medel som utvinns ur barken på kvillajaträdet."
    },
    "E1103": {
        "name": "Invertas",
        "description": "Enzym som framställs av jäst."
    },
    "E1200": {
        "name": "Polydextros",
        "description": "Syntetisk kostfiber framställd av glukos."
    },
    "E1201": {
        "name": "Polyvinylpyrrolidon",
        "description": "Syntetiskt stabiliseringsmedel."
    },
    "E1202": {
        "name": "Polyvinylpolypyrrolidon",
        "description": "Syntetiskt stabiliseringsmedel och klarningsmedel."
    },
    "E1203": {
        "name": "Polyvinylalkohol",
        "description": "Syntetiskt filmbildande medel för kosttillskott."
    },
    "E1404": {
        "name": "Oxiderad stärkelse",
        "description": "Modifierad stärkelse från majs, potatis eller vete."
    },
    "E1410": {
        "name": "Monostärkelsefosfat",
        "description": "Modifierad stärkelse från majs, potatis eller vete."
    },
    "E1412": {
        "name": "Distärkelsefosfat",
        "description": "Modifierad stärkelse från majs, potatis eller vete."
    },
    "E1413": {
        "name": "Fosfaterat distärkelsefosfat",
        "description": "Modifierad stärkelse från majs, potatis eller vete."
    },
    "E1414": {
        "name": "Acetylerat distärkelsefosfat",
        "description": "Modifierad stärkelse från majs, potatis eller vete."
    },
    "E1420": {
        "name": "Acetylerad stärkelse",
        "description": "Modifierad stärkelse från majs, potatis eller vete."
    },
    "E1422": {
        "name": "Acetylerat distärkelseadipat",
        "description": "Modifierad stärkelse från majs, potatis eller vete."
    },
    "E1440": {
        "name": "Hydroxipropylstärkelse",
        "description": "Modifierad stärkelse från majs, potatis eller vete."
    },
    "E1442": {
        "name": "Hydroxipropyldistärkelsefosfat",
        "description": "Modifierad stärkelse från majs, potatis eller vete."
    },
    "E1450": {
        "name": "Stärkelsenatriumoktenylsuccinat",
        "description": "Modifierad stärkelse som används som emulgeringsmedel."
    },
    "E1451": {
        "name": "Acetylerad oxiderad stärkelse",
        "description": "Modifierad stärkelse från majs, potatis eller vete."
    },
    "E1452": {
        "name": "Stärkelsealuminiumoktenylsuccinat",
        "description": "Modifierad stärkelse som används i kosttillskott."
    },
    "E1505": {
        "name": "Trietylcitrat",
        "description": "Syntetiskt bärarämne framställt av citronsyra."
    },
    "E1520": {
        "name": "Propylenglykol",
        "description": "Syntetiskt bärarämne och fuktbevarande medel."
    },
    "E1521": {
        "name": "Polyetylenglykol",
        "description": "Syntetiskt bärarämne."
    },
}
