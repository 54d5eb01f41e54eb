"""Reference data loaded into a fresh store."""

SEED_CATEGORIES = [
    {"name": "Programação", "description": "Desenvolvimento de software e web", "icon_name": "code-line", "image_url": "https://images.unsplash.com/photo-1517694712202-14dd9538aa97"},
    {"name": "Idiomas", "description": "Aprendizado de idiomas estrangeiros", "icon_name": "translate", "image_url": "https://images.unsplash.com/photo-1535016120720-40c646be5580"},
    {"name": "Música", "description": "Instrumentos musicais e teoria", "icon_name": "music-2-line", "image_url": "https://images.unsplash.com/photo-1557838923-2985c318be48"},
    {"name": "Culinária", "description": "Técnicas de cozinha e receitas", "icon_name": "restaurant-line", "image_url": "https://images.unsplash.com/photo-1601784551167-2c698216cad7"},
    {"name": "Esportes", "description": "Diferentes modalidades esportivas", "icon_name": "basketball-line", "image_url": "https://images.unsplash.com/photo-1552674605-db6ffd4facb5"},
    {"name": "Negócios", "description": "Empreendedorismo e gestão", "icon_name": "briefcase-line", "image_url": "https://images.unsplash.com/photo-1542744173-8e7e53415bb0"},
    {"name": "Matemática", "description": "Cálculo, álgebra e estatística", "icon_name": "calculator-line", "image_url": "https://images.unsplash.com/photo-1551269901-5c5e14c25df7"},
    {"name": "Design", "description": "Design gráfico e UX/UI", "icon_name": "palette-line", "image_url": "https://unsplash.com/photos/a-colorful-abstract-painting-with-a-teal-background-S_uHLJTnb5o"},
]

SEED_SKILLS = [
    {"name": "HTML/CSS", "category": "Programação", "description": "Fundamentos de web", "icon_name": "code-s-slash-line"},
    {"name": "JavaScript", "category": "Programação", "description": "Linguagem de programação web", "icon_name": "javascript-line"},
    {"name": "React", "category": "Programação", "description": "Biblioteca para interfaces", "icon_name": "reactjs-line"},
    {"name": "Inglês", "category": "Idiomas", "description": "Idioma global", "icon_name": "english-input"},
    {"name": "Espanhol", "category": "Idiomas", "description": "Segunda língua mais falada", "icon_name": "spain-fill"},
    {"name": "Piano", "category": "Música", "description": "Instrumento de teclas", "icon_name": "music-line"},
    {"name": "Violão", "category": "Música", "description": "Instrumento de cordas", "icon_name": "guitar-line"},
]
