VEGAN_PRESERVATIVES = {
    "E200": {
        "name": "Sorbinsyra",
        "description": "Konserveringsmedel som ursprungligen utvanns ur rönnbär, framställs idag syntetiskt."
    },
    "E202": {
        "name": "Kaliumsorbat",
        "description": "Kaliumsalt av sorbinsyra. Konserveringsmedel."
    },
    "E203": {
        "name": "Kalciumsorbat",
        "description": "Kalciumsalt av sorbinsyra. Konserveringsmedel."
    },
    "E210": {
        "name": "Bensoesyra",
        "description": "Konserveringsmedel som finns naturligt i bär, framställs syntetiskt."
    },
    "E211": {
        "name": "Natriumbensoat",
        "description": "Natriumsalt av bensoesyra. Konserveringsmedel."
    },
    "E212": {
        "name": "Kaliumbensoat",
        "description": "Kaliumsalt av bensoesyra. Konserveringsmedel."
    },
    "E213": {
        "name": "Kalciumbensoat",
        "description": "Kalciumsalt av bensoesyra. Konserveringsmedel."
    },
    "E214": {
        "name": "Etylparahydroxibensoat",
        "description": "Syntetiskt konserveringsmedel (paraben)."
    },
    "E215": {
        "name": "Natriumetylparahydroxibensoat",
        "description": "Syntetiskt konserveringsmedel (paraben)."
    },
    "E218": {
        "name": "Metylparahydroxibensoat",
        "description": "Syntetiskt konserveringsmedel (paraben)."
    },
    "E219": {
        "name": "Natriummetylparahydroxibensoat",
        "description": "Syntetiskt konserveringsmedel (paraben)."
    },
    "E220": {
        "name": "Svaveldioxid",
        "description": "Konserveringsmedel och antioxidationsmedel, vanligt i vin och torkad frukt."
    },
    "E221": {
        "name": "Natriumsulfit",
        "description": "Konserveringsmedel som avger svaveldioxid."
    },
    "E222": {
        "name": "Natriumvätesulfit",
        "description": "Konserveringsmedel som avger svaveldioxid."
    },
    "E223": {
        "name": "Natriumdisulfit",
        "description": "Konserveringsmedel som avger svaveldioxid."
    },
    "E224": {
        "name": "Kaliumdisulfit",
        "description": "Konserveringsmedel som avger svaveldioxid."
    },
    "E226": {
        "name": "Kalciumsulfit",
        "description": "Konserveringsmedel som avger svaveldioxid."
    },
    "E227": {
        "name": "Kalciumvätesulfit",
        "description": "Konserveringsmedel som avger svaveldioxid."
    },
    "E228": {
        "name": "Kaliumvätesulfit",
        "description": "Konserveringsmedel som avger svaveldioxid."
    },
    "E234": {
        "name": "Nisin",
        "description": "Konserveringsmedel som bildas av mjölksyrabakterier vid jäsning."
    },
    "E235": {
        "name": "Natamycin",
        "description": "Konserveringsmedel mot mögel som bildas av bakterier vid jäsning."
    },
    "E239": {
        "name": "Hexametylentetramin",
        "description": "Syntetiskt konserveringsmedel."
    },
    "E242": {
        "name": "Dimetyldikarbonat",
        "description": "Syntetiskt konserveringsmedel för drycker."
    },
    "E249": {
        "name": "Kaliumnitrit",
        "description": "Konserveringsmedel i charkprodukter, framställs syntetiskt."
    },
    "E250": {
        "name": "Natriumnitrit",
        "description": "Konserveringsmedel i charkprodukter, framställs syntetiskt."
    },
    "E251": {
        "name": "Natriumnitrat",
        "description": "Konserveringsmedel, framställs syntetiskt."
    },
    "E252": {
        "name": "Kaliumnitrat",
        "description": "Konserveringsmedel, framställs syntetiskt."
    },
    "E260": {
        "name": "Ättiksyra",
        "description": "Surhetsreglerande medel, framställs genom jäsning eller syntetiskt."
    },
    "E261": {
        "name": "Kaliumacetat",
        "description": "Kaliumsalt av ättiksyra."
    },
    "E262": {
        "name": "Natriumacetater",
        "description": "Natriumsalter av ättiksyra."
    },
    "E263": {
        "name": "Kalciumacetat",
        "description": "Kalciumsalt av ättiksyra."
    },
    "E270": {
        "name": "Mjölksyra",
        "description": "Syra som framställs genom jäsning av socker. Innehåller inte mjölk."
    },
    "E280": {
        "name": "Propionsyra",
        "description": "Konserveringsmedel mot mögel, framställs syntetiskt."
    },
    "E281": {
        "name": "Natriumpropionat",
        "description": "Natriumsalt av propionsyra."
    },
    "E282": {
        "name": "Kalciumpropionat",
        "description": "Kalciumsalt av propionsyra, vanligt i bröd."
    },
    "E283": {
        "name": "Kaliumpropionat",
        "description": "Kaliumsalt av propionsyra."
    },
    "E284": {
        "name": "Borsyra",
        "description": "Konserveringsmedel som endast får användas i störrom."
    },
    "E285": {
        "name": "Natriumtetraborat (borax)",
        "description": "Konserveringsmedel som endast får användas i störrom."
    },
    "E290": {
        "name": "Koldioxid",
        "description": "Gas som används för kolsyrade drycker och förpackningar."
    },
    "E296": {
        "name": "Äppelsyra",
        "description": "Syra som finns naturligt i frukt, framställs syntetiskt."
    },
    "E297": {
        "name": "Fumarsyra",
        "description": "Surhetsreglerande medel, framställs syntetiskt."
    },
    "E300": {
        "name": "Askorbinsyra",
        "description": "Vitamin C. Antioxidationsmedel som framställs genom jäsning."
    },
    "E301": {
        "name": "Natriumaskorbat",
        "description": "Natriumsalt av askorbinsyra."
    },
    "E302": {
        "name": "Kalciumaskorbat",
        "description": "Kalciumsalt av askorbinsyra."
    },
    "E304": {
        "name": "Fettsyraestrar av askorbinsyra",
        "description": "Fettlöslig form av vitamin C, framställs med palmitinsyra från vegetabiliska oljor."
    },
    "E306": {
        "name": "Tokoferolrikt extrakt",
        "description": "Vitamin E som utvinns ur vegetabiliska oljor."
    },
    "E307": {
        "name": "Alfa-tokoferol",
        "description": "Vitamin E, framställs syntetiskt."
    },
    "E308": {
        "name": "Gamma-tokoferol",
        "description": "Vitamin E, framställs syntetiskt."
    },
    "E309": {
        "name": "Delta-tokoferol",
        "description": "Vitamin E, framställs syntetiskt."
    },
    "E310": {
        "name": "Propylgallat",
        "description": "Syntetiskt antioxidationsmedel."
    },
    "E315": {
        "name": "Erytorbinsyra",
        "description": "Antioxidationsmedel som framställs genom jäsning."
    },
    "E316": {
        "name": "Natriumerytorbat",
        "description": "Natriumsalt av erytorbinsyra."
    },
    "E319": {
        "name": "Tertiärbutylhydrokinon (TBHQ)",
        "description": "Syntetiskt antioxidationsmedel."
    },
    "E320": {
        "name": "Butylhydroxianisol (BHA)",
        "description": "Syntetiskt antioxidationsmedel."
    },
    "E321": {
        "name": "Butylhydroxitoluen (BHT)",
        "description": "Syntetiskt antioxidationsmedel."
    },
    "E325": {
        "name": "Natriumlaktat",
        "description": "Salt av mjölksyra som framställs genom jäsning. Innehåller inte mjölk."
    },
    "E326": {
        "name": "Kaliumlaktat",
        "description": "Salt av mjölksyra som framställs genom jäsning. Innehåller inte mjölk."
    },
    "E327": {
        "name": "Kalciumlaktat",
        "description": "Salt av mjölksyra som framställs genom jäsning. Innehåller inte mjölk."
    },
    "E330": {
        "name": "Citronsyra",
        "description": "Syra som framställs genom jäsning med mögelsvamp."
    },
    "E331": {
        "name": "Natriumcitrater",
        "description": "Natriumsalter av citronsyra."
    },
    "E332": {
        "name": "Kaliumcitrater",
        "description": "Kaliumsalter av citronsyra."
    },
    "E333": {
        "name": "Kalciumcitrater",
        "description": "Kalciumsalter av citronsyra."
    },
    "E334": {
        "name": "L(+)-vinsyra",
        "description": "Syra som utvinns ur restprodukter från vintillverkning."
    },
    "E335": {
        "name": "Natriumtartrater",
        "description": "Natriumsalter av vinsyra."
    },
    "E336": {
        "name": "Kaliumtartrater",
        "description": "Kaliumsalter av vinsyra, bland annat vinsten."
    },
    "E337": {
        "name": "Kaliumnatriumtartrat",
        "description": "Salt av vinsyra."
    },
    "E338": {
        "name": "Fosforsyra",
        "description": "Surhetsreglerande medel som framställs av fosfatmineral."
    },
    "E339": {
        "name": "Natriumfosfater",
        "description": "Mineraliska salter av fosforsyra."
    },
    "E340": {
        "name": "Kaliumfosfater",
        "description": "Mineraliska salter av fosforsyra."
    },
    "E341": {
        "name": "Kalciumfosfater",
        "description": "Mineraliska salter av fosforsyra."
    },
    "E343": {
        "name": "Magnesiumfosfater",
        "description": "Mineraliska salter av fosforsyra."
    },
    "E350": {
        "name": "Natriummalater",
        "description": "Natriumsalter av äppelsyra."
    },
    "E351": {
        "name": "Kaliummalat",
        "description": "Kaliumsalt av äppelsyra."
    },
    "E352": {
        "name": "Kalciummalater",
        "description": "Kalciumsalter av äppelsyra."
    },
    "E353": {
        "name": "Metavinsyra",
        "description": "Stabiliseringsmedel för vin, framställs av vinsyra."
    },
    "E354": {
        "name": "Kalciumtartrat",
        "description": "Kalciumsalt av vinsyra."
    },
    "E355": {
        "name": "Adipinsyra",
        "description": "Syntetiskt surhetsreglerande medel."
    },
    "E356": {
        "name": "Natriumadipat",
        "description": "Natriumsalt av adipinsyra."
    },
    "E357": {
        "name": "Kaliumadipat",
        "description": "Kaliumsalt av adipinsyra."
    },
    "E363": {
        "name": "Bärnstenssyra",
        "description": "Surhetsreglerande medel, framställs syntetiskt eller genom jäsning."
    },
    "E380": {
        "name": "Triammoniumcitrat",
        "description": "Ammoniumsalt av citronsyra."
    },
    "E385": {
        "name": "Kalciumdinatrium-EDTA",
        "description": "Syntetiskt komplexbildande medel."
    },
    "E392": {
        "name": "Rosmarinextrakt",
        "description": "Antioxidationsmedel som utvinns ur rosmarin."
    },
}
