"""
Contenu FR par type de page : hero + 6 features + 4 stats.

Les titres contiennent des emplacements {nom} résolus selon le village :
la région (cinque-terre) a sa propre tournure ("aux Cinque Terre"),
un village reçoit un préfixe + son nom ("à Monterosso").
"""
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..core.villages import REGION, VILLAGES, display_name
from ..sections.footer import FooterColumn, FooterLink, FooterSection, SocialLink

# (tournure région, préfixe village)
PlaceForm = Tuple[str, str]

FR_PREFIX = "/fr"


def place(village: str, form: PlaceForm) -> str:
    region_form, prefix = form
    if village == REGION:
        return region_form
    return f"{prefix}{display_name(village)}"


class PageTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    eyebrow: str
    title: str
    subtitle: str
    image: str
    places: Dict[str, PlaceForm] = Field(default_factory=dict)
    features: List[Tuple[str, str, str]]    # (icon, titre, description)
    stats: List[Tuple[str, str]]            # (valeur, libellé)

    def hero(self, village: str) -> Dict[str, str]:
        values = {name: place(village, form) for name, form in self.places.items()}
        return {
            "eyebrow": self.eyebrow,
            "title": self.title.format(**values),
            "subtitle": self.subtitle.format(**values),
            "image": self.image,
        }

    def feature_items(self) -> List[Dict[str, str]]:
        return [{"icon": i, "title": t, "description": d} for i, t, d in self.features]

    def stat_items(self) -> List[Dict[str, str]]:
        return [{"value": v, "label": label} for v, label in self.stats]


def _unsplash(photo_id: str) -> str:
    return f"https://images.unsplash.com/photo-{photo_id}?w=1200&q=80"


AUX = ("aux Cinque Terre", "à ")
DES = ("des Cinque Terre", "de ")
NOM = ("Cinque Terre", "")


# ── Templates ───────────────────────────────────────────────────────────────

TEMPLATES: Dict[str, PageTemplate] = {
    "getting-here": PageTemplate(
        eyebrow="Accès & Transports",
        title="Comment Se Rendre {lieu}",
        subtitle="Tous les moyens de transport pour rejoindre {cible}. Trains, voiture, avion, "
                 "bateau : planifiez votre voyage facilement.",
        image=_unsplash("1474487548417-781cb71495f3"),
        places={"lieu": AUX, "cible": ("les cinq villages", "")},
        features=[
            ("train", "En Train", "Le moyen le plus pratique. Trains régionaux depuis La Spezia ou Levanto. "
                                  "Carte Cinque Terre inclut trains illimités."),
            ("car", "En Voiture", "Parkings limités et chers. Déconseillé. Mieux vaut garer à La Spezia/Levanto "
                                  "et prendre le train."),
            ("plane", "En Avion", "Aéroports de Pise (90km) ou Gênes (120km). Puis train jusqu'à La Spezia."),
            ("ship", "En Bateau", "Ferries saisonniers depuis Portofino, Santa Margherita, La Spezia (avril-octobre)."),
            ("bus", "En Bus", "Services locaux depuis villes voisines. Moins pratique que le train."),
            ("info", "Depuis La Spezia", "Hub principal. Trains toutes les 15-30min. 5-10min par village."),
        ],
        stats=[
            ("15-30min", "Fréquence des Trains"),
            ("5-10€", "Billet Train Aller-Retour"),
            ("18€", "Carte Cinque Terre 1 Jour"),
            ("Toute l'année", "Trains Disponibles"),
        ],
    ),
    "things-to-do": PageTemplate(
        eyebrow="Activités & Expériences",
        title="Que Faire {lieu}",
        subtitle="Découvrez les meilleures activités : randonnées, plages, gastronomie, culture locale. "
                 "Un programme complet pour profiter au maximum de votre séjour.",
        image=_unsplash("1530521954074-e64f6810b32d"),
        places={"lieu": AUX},
        features=[
            ("compass", "Randonnées Côtières", "Sentiers panoramiques reliant les villages avec vues "
                                               "spectaculaires sur la Méditerranée."),
            ("utensils", "Gastronomie Locale", "Dégustez pesto, focaccia, fruits de mer frais et vin "
                                               "Sciacchetrà dans les trattorias."),
            ("camera", "Photographie", "Villages colorés, couchers de soleil, paysages marins : paradis "
                                       "des photographes."),
            ("wine", "Dégustation de Vins", "Visitez les vignobles en terrasses et dégustez les vins blancs locaux."),
            ("sailboat", "Excursions en Bateau", "Admirez les villages depuis la mer, découvrez criques cachées."),
            ("snorkel", "Plongée & Snorkeling", "Eaux cristallines riches en vie marine. Location d'équipement "
                                                "disponible."),
        ],
        stats=[
            ("50+", "Activités Disponibles"),
            ("120km", "de Sentiers"),
            ("6", "Plages Principales"),
            ("100+", "Restaurants"),
        ],
    ),
    "weather": PageTemplate(
        eyebrow="Climat & Météo",
        title="Météo {lieu}",
        subtitle="Climat méditerranéen doux toute l'année. Découvrez les meilleures périodes pour visiter "
                 "et quoi emporter selon la saison.",
        image=_unsplash("1601134467661-3d775b999c8b"),
        places={"lieu": DES},
        features=[
            ("sun", "Printemps (Mars-Mai)", "15-22°C. Idéal pour randonnées. Fleurs en bloom. Moins de touristes."),
            ("thermometer-sun", "Été (Juin-Août)", "25-32°C. Haute saison. Parfait pour la plage. Très fréquenté."),
            ("leaf", "Automne (Sept-Nov)", "18-25°C. Excellente période. Mer encore chaude. Vendanges."),
            ("cloud-rain", "Hiver (Déc-Fév)", "8-15°C. Basse saison. Pluies possibles. Calme et authentique."),
            ("droplet", "Précipitations", "Octobre-novembre les plus humides. Étés secs. Toujours possible "
                                          "pluie courte."),
            ("waves", "Température Mer", "22-26°C en été, 14-18°C en hiver. Baignade juin à septembre."),
        ],
        stats=[
            ("300+", "Jours de Soleil/An"),
            ("25°C", "Température Moyenne Été"),
            ("Avril-Oct", "Meilleure Période"),
            ("22-26°C", "Température Mer (Été)"),
        ],
    ),
    "faq": PageTemplate(
        eyebrow="Questions Fréquentes",
        title="FAQ {lieu}",
        subtitle="Toutes les réponses à vos questions sur la visite {cible}. Pratique, accès, "
                 "hébergement, activités.",
        image=_unsplash("1516321165247-4aa89a48be28"),
        places={"lieu": NOM, "cible": ("des cinq villages", "de ")},
        features=[
            ("help-circle", "Combien de temps rester ?", "Minimum 2-3 jours pour voir tous les villages. "
                                                         "4-5 jours idéal pour randonner et explorer."),
            ("ticket", "Ai-je besoin de la Carte Cinque Terre ?", "Oui si vous randonnez sur sentiers payants. "
                                                                  "Inclut aussi trains illimités. 7,50-18€/jour."),
            ("calendar", "Meilleure période pour visiter ?", "Avril-mai et septembre-octobre. Moins de foule, "
                                                             "météo excellente, prix modérés."),
            ("users", "Les Cinque Terre sont-elles surpeuplées ?", "Oui en juillet-août et weekends. Visitez en "
                                                                   "semaine, hors saison, ou arrivez très tôt."),
            ("luggage", "Où laisser mes bagages ?", "Consignes aux gares de La Spezia, Monterosso, Riomaggiore. "
                                                    "5-8€/bagage/jour."),
            ("accessibility", "Accessible en fauteuil roulant ?", "Difficile. Villages très pentus avec escaliers. "
                                                                  "Monterosso le plus accessible."),
        ],
        stats=[
            ("2-3 jours", "Durée Minimum"),
            ("7,50-18€", "Carte Cinque Terre"),
            ("Avril-Oct", "Haute Saison"),
            ("5", "Villages à Visiter"),
        ],
    ),
    "agriturismi": PageTemplate(
        eyebrow="Séjours à la Ferme",
        title="Agritourismes {lieu}",
        subtitle="Séjournez dans des fermes traditionnelles des collines environnantes. Produits locaux, "
                 "vues panoramiques, authenticité garantie.",
        image=_unsplash("1523741543316-beb7fc7023d8"),
        places={"lieu": DES},
        features=[
            ("home", "Hébergement Authentique", "Chambres dans fermes rénovées avec charme rustique et "
                                                "confort moderne."),
            ("utensils", "Cuisine Maison", "Repas préparés avec produits de la ferme : légumes, huile d'olive, vin."),
            ("wine", "Vignobles & Oliveraies", "Découvrez la production locale, dégustez vins et huile d'olive "
                                               "artisanaux."),
            ("mountain", "Vues Panoramiques", "Situés en hauteur avec vues spectaculaires sur mer et villages."),
            ("leaf", "Nature & Tranquillité", "Éloignés de la foule des villages. Calme et repos assurés."),
            ("car", "Voiture Recommandée", "Accès souvent difficile en transport public. Location voiture utile."),
        ],
        stats=[
            ("20+", "Agritourismes dans la Région"),
            ("60-120€", "Prix Nuit (Chambre Double)"),
            ("15-25€", "Repas Typique"),
            ("5-10km", "Distance des Villages"),
        ],
    ),
    "apartments": PageTemplate(
        eyebrow="Locations de Vacances",
        title="Appartements {lieu}",
        subtitle="Louez un appartement pour plus d'indépendance et d'espace. Cuisine équipée, séjour en "
                 "famille, vie de quartier authentique.",
        image=_unsplash("1522708323590-d24dbb6b0267"),
        places={"lieu": DES},
        features=[
            ("key", "Indépendance Totale", "Votre propre espace avec cuisine, salon, parfait pour familles "
                                           "ou longs séjours."),
            ("chef-hat", "Cuisine Équipée", "Préparez vos repas avec produits du marché local. Économisez "
                                            "sur restaurants."),
            ("wifi", "Confort Moderne", "WiFi, climatisation, lave-linge dans la plupart des appartements."),
            ("users", "Idéal Familles", "Plus d'espace qu'une chambre d'hôtel. Options 2-4 chambres disponibles."),
            ("map-pin", "Emplacements Variés", "Centre historique, proche gare, vue mer. Large choix selon "
                                               "préférences."),
            ("clock", "Flexibilité", "Séjours courts ou longs. Check-in/out souvent flexible."),
        ],
        stats=[
            ("200+", "Appartements Disponibles"),
            ("80-250€", "Prix/Nuit Selon Taille"),
            ("3 nuits", "Séjour Minimum Souvent"),
            ("2-6", "Capacité Personnes"),
        ],
    ),
    "boat-tours": PageTemplate(
        eyebrow="Excursions Maritimes",
        title="Excursions en Bateau {lieu}",
        subtitle="Admirez les villages colorés depuis la mer. Ferries entre villages, tours panoramiques, "
                 "excursions au coucher du soleil. Perspective unique garantie.",
        image=_unsplash("1544551763-46a013bb70d5"),
        places={"lieu": ("aux Cinque Terre", "depuis ")},
        features=[
            ("sailboat", "Ferries Entre Villages", "Service régulier La Spezia-Portovenere-5 Terre. Avril à octobre."),
            ("anchor", "Tours Panoramiques", "Circuits complets de 2-3h avec arrêts baignade dans criques isolées."),
            ("sunset", "Excursions Coucher de Soleil", "Soirées spéciales avec apéritif à bord. Magique et "
                                                       "romantique."),
            ("kayak", "Kayak de Mer", "Location kayak pour explorer à votre rythme. Guides disponibles."),
            ("snorkel", "Plongée & Snorkeling", "Excursions vers spots de plongée. Équipement fourni."),
            ("fishing", "Pêche Traditionnelle", "Sorties avec pêcheurs locaux. Expérience authentique."),
        ],
        stats=[
            ("25-35€", "Ferry Journée Complète"),
            ("50-80€", "Tour Guidé 2-3h"),
            ("Avril-Oct", "Saison Opération"),
            ("6-8 départs", "Par Jour (Haute Saison)"),
        ],
    ),
    "camping": PageTemplate(
        eyebrow="Camping & Nature",
        title="Camping {lieu}",
        subtitle="Campings dans les environs pour budgets serrés et amoureux de nature. Proche des villages, "
                 "bien équipés, ambiance conviviale.",
        image=_unsplash("1478131143081-80f7f84ca84d"),
        places={"lieu": ("près des Cinque Terre", "près de ")},
        features=[
            ("tent", "Emplacements Tentes", "Emplacements ombragés pour tentes. Sanitaires modernes, "
                                            "douches chaudes."),
            ("caravan", "Camping-cars & Caravanes", "Emplacements avec branchements électriques. Stations service."),
            ("home", "Bungalows & Mobil-homes", "Hébergements confort sans tente. Cuisine, salle de bain privée."),
            ("swimming-pool", "Piscines", "La plupart ont piscines. Idéal après randonnées."),
            ("utensils", "Restaurants & Supérettes", "Services sur place. Cuisine commune disponible."),
            ("train", "Navettes Gares", "Beaucoup offrent navettes gratuites vers gares ferroviaires."),
        ],
        stats=[
            ("15-30€", "Emplacement Tente/Nuit"),
            ("50-100€", "Bungalow/Nuit"),
            ("5-15min", "des Gares"),
            ("Avril-Oct", "Ouverture Principale"),
        ],
    ),
    "insights": PageTemplate(
        eyebrow="Conseils d'Experts",
        title="Conseils & Astuces {lieu}",
        subtitle="Conseils pratiques de locaux et experts pour profiter au maximum de votre séjour. "
                 "Évitez les pièges à touristes, découvrez les secrets.",
        image=_unsplash("1488646953014-85cb44e25828"),
        places={"lieu": NOM},
        features=[
            ("sunrise", "Partez Tôt", "Villages magiques au lever du soleil avant arrivée des foules. "
                                      "Lumière photographique parfaite."),
            ("calendar", "Évitez Juillet-Août", "Haute saison bondée et chère. Préférez mai-juin ou "
                                                "septembre-octobre."),
            ("train", "Utilisez les Trains", "Oubliez la voiture. Trains fréquents, pratiques, économiques "
                                             "entre villages."),
            ("backpack", "Voyagez Léger", "Escaliers partout. Valise à roulettes légère ou sac à dos recommandé."),
            ("ticket", "Carte Cinque Terre Card", "Rentable si vous randonnez. Compare avec tickets trains "
                                                  "individuels."),
            ("utensils", "Mangez où Mangent les Locaux", "Ruelles intérieures ont souvent meilleurs restaurants, "
                                                         "loin des touristes."),
        ],
        stats=[
            ("7h-9h", "Meilleure Heure Visite"),
            ("2-3L", "Eau à Emporter Randonnée"),
            ("Avril-Mai", "Période Optimale"),
            ("Sept-Oct", "Aussi Excellente"),
        ],
    ),
    "maps": PageTemplate(
        eyebrow="Cartes & Plans",
        title="Cartes {lieu}",
        subtitle="Cartes détaillées des villages, sentiers de randonnée, points d'intérêt. Planifiez vos "
                 "itinéraires et explorations.",
        image=_unsplash("1524661135-423995f22d0b"),
        places={"lieu": DES},
        features=[
            ("map", "Cartes des Villages", "Plans détaillés de chaque village avec rues, monuments, services."),
            ("compass", "Sentiers de Randonnée", "Cartes topographiques des sentiers avec distances, dénivelés, "
                                                 "temps."),
            ("train", "Réseau Ferroviaire", "Horaires et connexions trains entre villages et villes voisines."),
            ("anchor", "Ports & Embarcadères", "Emplacements ferries, locations bateaux, points d'embarquement."),
            ("camera", "Points de Vue", "Meilleurs spots photo marqués. Couchers de soleil, panoramas."),
            ("info", "Services Pratiques", "Offices tourisme, distributeurs, pharmacies, supermarchés localisés."),
        ],
        stats=[
            ("12km", "Sentiers Côtiers"),
            ("120km", "Total Sentiers Région"),
            ("5", "Gares Principales"),
            ("20+", "Points de Vue"),
        ],
    ),
    "sights": PageTemplate(
        eyebrow="Sites & Monuments",
        title="Sites à Voir {lieu}",
        subtitle="Découvrez les monuments historiques, églises, fortifications et points de vue "
                 "panoramiques. Le patrimoine culturel des Cinque Terre.",
        image=_unsplash("1527631746610-bca00a040d60"),
        places={"lieu": AUX},
        features=[
            ("church", "Églises Historiques", "Sanctuaires médiévaux, églises baroques, chapelles perchées. "
                                              "Architecture religieuse riche."),
            ("castle", "Fortifications Génoises", "Tours de guet, châteaux, remparts datant de l'époque de la "
                                                  "République de Gênes."),
            ("camera", "Points de Vue", "Belvédères panoramiques sur mer et villages. Parfaits pour photographie."),
            ("landmark", "Centres Historiques", "Ruelles médiévales, maisons-tours colorées, places pittoresques."),
            ("anchor", "Ports & Marines", "Petits ports de pêche traditionnels, marines colorées, bateaux typiques."),
            ("leaf", "Vignobles en Terrasses", "Paysages culturels uniques classés UNESCO. Murs en pierre "
                                               "séculaires."),
        ],
        stats=[
            ("12+", "Églises & Sanctuaires"),
            ("5", "Fortifications Majeures"),
            ("1997", "Classement UNESCO"),
            ("100+", "Monuments Historiques"),
        ],
    ),
    "blog": PageTemplate(
        eyebrow="Récits & Guides",
        title="Blog {lieu}",
        subtitle="Récits de voyage, guides pratiques, conseils d'initiés. Tout ce que vous devez savoir "
                 "pour un séjour réussi.",
        image=_unsplash("1455849318743-b2233052fcff"),
        places={"lieu": NOM},
        features=[
            ("book-open", "Guides Complets", "Itinéraires détaillés, planification jour par jour, budgets et "
                                             "conseils pratiques."),
            ("users", "Expériences Voyageurs", "Récits authentiques de visiteurs. Ce qui a marché, les erreurs "
                                               "à éviter."),
            ("camera", "Photographie", "Meilleurs spots photo, conseils techniques, horaires optimaux pour lumière."),
            ("utensils", "Gastronomie", "Restaurants testés, recettes locales, où trouver les meilleures "
                                        "spécialités."),
            ("compass", "Randonnées", "Descriptions détaillées sentiers, niveaux difficulté, équipement nécessaire."),
            ("calendar", "Saisons & Événements", "Quand partir, festivals à ne pas manquer, avantages de chaque "
                                                 "saison."),
        ],
        stats=[
            ("50+", "Articles Publiés"),
            ("10+", "Guides Complets"),
            ("100+", "Photos HD"),
            ("Hebdo", "Nouveaux Articles"),
        ],
    ),
}


# ── Footer commun ───────────────────────────────────────────────────────────

def _column(title: str, links: List[Tuple[str, str]]) -> FooterColumn:
    return FooterColumn(title=title, links=[FooterLink(label=label, url=url) for label, url in links])


def _region_link(slug: str) -> str:
    return f"{FR_PREFIX}/{REGION}/{slug}"


FOOTER_SECTION = FooterSection(
    variant="4-column-simple",
    company_name="Cinqueterre.travel",
    company_description="Votre guide complet des plus beaux villages côtiers d'Italie.",
    copyright="© 2025 Cinqueterre.travel. Tous droits réservés.",
    columns=[
        _column("Villages", [(display_name(v), f"{FR_PREFIX}/{v}") for v in VILLAGES]),
        _column("Planifier", [
            ("Comment S'y Rendre", _region_link("getting-here")),
            ("Où Dormir", _region_link("hotels")),
            ("Restaurants", _region_link("restaurants")),
            ("Carte", _region_link("maps")),
        ]),
        _column("Activités", [
            ("Randonnées", _region_link("hiking")),
            ("Plages", _region_link("beaches")),
            ("Excursions Bateau", _region_link("boat-tours")),
            ("Événements", _region_link("events")),
        ]),
        _column("Infos", [
            ("Météo", _region_link("weather")),
            ("FAQ", _region_link("faq")),
            ("Conseils", _region_link("insights")),
            ("Blog", _region_link("blog")),
        ]),
    ],
    social_links=[
        SocialLink(platform="instagram", url="https://instagram.com/cinqueterre"),
        SocialLink(platform="facebook", url="https://facebook.com/cinqueterre"),
    ],
)


def footer_block() -> Dict:
    """Footer FR sérialisé tel qu'il est écrit dans les documents (clés camelCase)."""
    return FOOTER_SECTION.model_dump(by_alias=True, exclude_none=True)
