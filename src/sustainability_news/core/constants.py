from __future__ import annotations

PILLARS = ("environmental", "social", "economic")  # 동점일 때 앞선 pillar가 우선

PILLAR_KEYWORDS = {  # pillar별 키워드 (가중치 = 구문 단어 수)
    "environmental": [
        "climate change", "global warming", "carbon emissions", "renewable energy",
        "solar power", "wind energy", "biodiversity", "conservation", "ecosystem",
        "deforestation", "ocean pollution", "water scarcity", "air quality",
        "green technology", "sustainable agriculture", "wildlife protection",
        "environmental protection", "clean energy", "carbon footprint",
        "greenhouse gas", "sustainability", "eco-friendly", "green economy",
        "circular economy", "waste management", "recycling", "pollution control",
        "electric vehicles", "carbon neutral", "net zero", "green building",
        "sustainable development", "environmental policy", "climate action",
    ],
    "social": [
        "social justice", "human rights", "gender equality", "education access",
        "healthcare", "poverty reduction", "community development", "fair trade",
        "labor rights", "social inclusion", "diversity", "equality",
        "public health", "social welfare", "humanitarian", "development aid",
        "social impact", "community empowerment", "social responsibility",
        "inclusive growth", "social innovation", "wellbeing", "food security",
        "affordable housing", "digital divide", "social mobility", "human development",
    ],
    "economic": [
        "sustainable finance", "green bonds", "impact investing", "esg investing",
        "sustainable business", "green growth", "economic development", "economic growth",
        "financial inclusion", "microfinance", "sustainable supply chain",
        "responsible investment", "green finance", "sustainable development finance",
        "impact measurement", "blended finance", "development finance", "investment",
        "sustainable economics", "economic sustainability", "green jobs",
        "sustainable banking", "carbon pricing", "green recovery", "circular business",
    ],
}

SDG_KEYWORDS = {  # SDG 번호별 키워드
    1: ["poverty", "extreme poverty", "income inequality", "basic needs", "social protection", "poor", "low income", "economic hardship"],
    2: ["hunger", "food security", "malnutrition", "agriculture", "food systems", "nutrition", "farming", "food crisis"],
    3: ["health", "healthcare", "wellbeing", "disease", "medical", "mental health", "wellness", "pandemic", "public health"],
    4: ["education", "learning", "school", "university", "literacy", "skills", "knowledge", "training", "educational access"],
    5: ["gender equality", "women empowerment", "gender", "women rights", "female", "girls", "maternal", "gender parity"],
    6: ["water", "sanitation", "clean water", "hygiene", "water management", "drinking water", "wastewater", "water crisis"],
    7: ["energy", "renewable energy", "clean energy", "energy access", "electricity", "power", "solar", "wind", "energy transition"],
    8: ["employment", "decent work", "economic growth", "jobs", "labor", "workforce", "unemployment", "job creation"],
    9: ["infrastructure", "innovation", "industry", "technology", "research", "development", "manufacturing", "digital infrastructure"],
    10: ["inequality", "inclusion", "discrimination", "social mobility", "equity", "marginalized", "income disparity"],
    11: ["cities", "urban", "sustainable cities", "housing", "urbanization", "smart cities", "transport", "urban planning"],
    12: ["consumption", "production", "waste", "circular economy", "resource efficiency", "recycling", "sustainable consumption"],
    13: ["climate action", "climate change", "global warming", "carbon", "mitigation", "adaptation", "emissions", "climate policy"],
    14: ["ocean", "marine", "sea", "aquatic", "fishing", "marine life", "underwater", "coral", "ocean conservation"],
    15: ["biodiversity", "forest", "land", "ecosystem", "wildlife", "terrestrial", "nature", "deforestation", "conservation"],
    16: ["peace", "justice", "institutions", "governance", "rule of law", "transparency", "corruption", "accountability"],
    17: ["partnership", "cooperation", "global partnership", "collaboration", "development cooperation", "multilateral", "international cooperation"],
}

PILLAR_DEFAULT_SDGS = {  # SDG 키워드가 하나도 없을 때 pillar별 대체 SDG
    "environmental": (13, 14, 15),
    "social": (1, 2, 3, 4, 5),
    "economic": (8, 9, 12),
}

SDG_METADATA = {
    1: {"title": "No Poverty", "description": "End poverty in all its forms everywhere", "color": "#E5243B", "icon": "HandHeart"},
    2: {"title": "Zero Hunger", "description": "End hunger, achieve food security and improved nutrition", "color": "#DDA63A", "icon": "Wheat"},
    3: {"title": "Good Health and Well-being", "description": "Ensure healthy lives and promote well-being for all", "color": "#4C9F38", "icon": "Heart"},
    4: {"title": "Quality Education", "description": "Ensure inclusive and equitable quality education", "color": "#C5192D", "icon": "GraduationCap"},
    5: {"title": "Gender Equality", "description": "Achieve gender equality and empower all women and girls", "color": "#FF3A21", "icon": "Users"},
    6: {"title": "Clean Water and Sanitation", "description": "Ensure availability and sustainable management of water", "color": "#26BDE2", "icon": "Droplets"},
    7: {"title": "Affordable and Clean Energy", "description": "Ensure access to affordable, reliable, sustainable energy", "color": "#FCC30B", "icon": "Zap"},
    8: {"title": "Decent Work and Economic Growth", "description": "Promote sustained, inclusive economic growth", "color": "#A21942", "icon": "TrendingUp"},
    9: {"title": "Industry, Innovation and Infrastructure", "description": "Build resilient infrastructure, promote innovation", "color": "#FD6925", "icon": "Building"},
    10: {"title": "Reduced Inequality", "description": "Reduce inequality within and among countries", "color": "#DD1367", "icon": "Scale"},
    11: {"title": "Sustainable Cities and Communities", "description": "Make cities and human settlements sustainable", "color": "#FD9D24", "icon": "Building2"},
    12: {"title": "Responsible Consumption and Production", "description": "Ensure sustainable consumption and production patterns", "color": "#BF8B2E", "icon": "Recycle"},
    13: {"title": "Climate Action", "description": "Take urgent action to combat climate change", "color": "#3F7E44", "icon": "Thermometer"},
    14: {"title": "Life Below Water", "description": "Conserve and sustainably use the oceans, seas", "color": "#0A97D9", "icon": "Fish"},
    15: {"title": "Life on Land", "description": "Protect, restore and promote sustainable use of ecosystems", "color": "#56C02B", "icon": "TreePine"},
    16: {"title": "Peace and Justice Strong Institutions", "description": "Promote peaceful and inclusive societies", "color": "#00689D", "icon": "Scale3d"},
    17: {"title": "Partnerships to achieve the Goal", "description": "Strengthen the means of implementation", "color": "#19486A", "icon": "Handshake"},
}

REGION_KEYWORDS = {  # 지역 추정 사전 (정의 순서대로 검사, 첫 매칭 지역 채택)
    "Asia Pacific": ["asia", "china", "india", "japan", "australia", "singapore", "thailand", "korea", "indonesia", "vietnam", "philippines"],
    "Europe": ["europe", "eu", "germany", "france", "uk", "britain", "netherlands", "sweden", "norway", "denmark", "finland"],
    "North America": ["usa", "america", "canada", "mexico", "united states", "us", "california", "texas", "new york"],
    "Africa": ["africa", "nigeria", "kenya", "south africa", "ghana", "ethiopia", "morocco", "egypt"],
    "Latin America": ["brazil", "argentina", "chile", "colombia", "latin america", "peru", "venezuela"],
    "Middle East": ["middle east", "saudi arabia", "uae", "israel", "iran", "turkey", "qatar", "kuwait"],
}
DEFAULT_REGION = "Global"

PILLAR_IMAGES = {  # pillar별 대표 이미지 (URL 해시로 결정적으로 선택)
    "environmental": (
        "https://images.pexels.com/photos/356036/pexels-photo-356036.jpeg?auto=compress&cs=tinysrgb&w=800",
        "https://images.pexels.com/photos/414837/pexels-photo-414837.jpeg?auto=compress&cs=tinysrgb&w=800",
        "https://images.pexels.com/photos/1108572/pexels-photo-1108572.jpeg?auto=compress&cs=tinysrgb&w=800",
        "https://images.pexels.com/photos/9800029/pexels-photo-9800029.jpeg?auto=compress&cs=tinysrgb&w=800",
    ),
    "social": (
        "https://images.pexels.com/photos/1459653/pexels-photo-1459653.jpeg?auto=compress&cs=tinysrgb&w=800",
        "https://images.pexels.com/photos/7088793/pexels-photo-7088793.jpeg?auto=compress&cs=tinysrgb&w=800",
        "https://images.pexels.com/photos/3184360/pexels-photo-3184360.jpeg?auto=compress&cs=tinysrgb&w=800",
        "https://images.pexels.com/photos/6646918/pexels-photo-6646918.jpeg?auto=compress&cs=tinysrgb&w=800",
    ),
    "economic": (
        "https://images.pexels.com/photos/3184465/pexels-photo-3184465.jpeg?auto=compress&cs=tinysrgb&w=800",
        "https://images.pexels.com/photos/259027/pexels-photo-259027.jpeg?auto=compress&cs=tinysrgb&w=800",
        "https://images.pexels.com/photos/3943716/pexels-photo-3943716.jpeg?auto=compress&cs=tinysrgb&w=800",
    ),
}

TITLE_MAX_CHARS = 200
SUMMARY_MAX_CHARS = 500
TITLE_MIN_CHARS = 15
MAX_TAGS = 5
SDG_TAG_LIMIT = 2
WORDS_PER_MINUTE = 200

GOVERNANCE_RANGE = (4, 8)  # 본문에서 거버넌스 신호를 얻을 수 없어 범위 내 난수 사용
RATING_MIN = 1
RATING_MAX = 10
RATING_ZERO_FALLBACK = 3

CONFIDENCE_HIGH = 0.1  # 메타데이터 신뢰도 분포 경계
CONFIDENCE_MEDIUM = 0.05
