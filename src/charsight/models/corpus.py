"""Seed text for the per-language frequency tables.

Each language has a representative paragraph (Article 1 of the Universal
Declaration of Human Rights) followed by its most common words.  The CJK
languages also carry a frequent-character string used both as extra unigram
mass and as the character-distribution table for multi-byte models.

Nothing here is read at import time by the scoring code; tables are built
from these strings once, on first use, by :mod:`charsight.models`.
"""

SEED_TEXT: dict[str, str] = {
    "en": (
        "All human beings are born free and equal in dignity and rights. They "
        "are endowed with reason and conscience and should act towards one "
        "another in a spirit of brotherhood. "
        "the of and to in is that it was for on are as with his they at be this "
        "have from or one had by word but not what all were we when your can "
        "said there use an each which she do how their if will up other about "
        "out many then them these so some her would make like him into time has "
        "look two more write go see number no way could people my than first "
        "water been call who its now find long down day did get come made may "
        "part over new after also our just know take year good give most very"
    ),
    "fr": (
        "Tous les êtres humains naissent libres et égaux en dignité et en "
        "droits. Ils sont doués de raison et de conscience et doivent agir les "
        "uns envers les autres dans un esprit de fraternité. "
        "le la les de des du un une être et à il elle avoir ne je son sa ses "
        "que se qui ce cette dans en au aux pour pas vous par sur faire plus "
        "dire me on mon lui nous comme mais pouvoir avec tout tous aller voir "
        "bien où sans tu ou leur homme si deux moi vouloir te femme venir quand "
        "grand celui notre devoir là jour prendre même votre rien petit encore "
        "aussi quelque dont trouver donner temps ça peu falloir sous parler "
        "alors chose déjà été après très année père mère frère élève"
    ),
    "de": (
        "Alle Menschen sind frei und gleich an Würde und Rechten geboren. Sie "
        "sind mit Vernunft und Gewissen begabt und sollen einander im Geist der "
        "Brüderlichkeit begegnen. "
        "der die und in den von zu das mit sich des auf für ist im dem nicht "
        "ein eine als auch es an werden aus er hat dass sie nach wird bei einer "
        "um am sind noch wie einem über einen so zum war haben nur oder aber "
        "vor zur bis mehr durch man sein wurde sei schon wenn können ihre "
        "müssen größer schön während würde später zurück natürlich gehört "
        "Mädchen Straße heißen wählen hören Tür"
    ),
    "es": (
        "Todos los seres humanos nacen libres e iguales en dignidad y derechos "
        "y, dotados como están de razón y conciencia, deben comportarse "
        "fraternalmente los unos con los otros. "
        "de la que el en y a los se del las un por con no una su para es al lo "
        "como más o pero sus le ha me si sin sobre este ya entre cuando todo "
        "esta ser son dos también fue había era muy años hasta desde está mi "
        "porque qué sólo han yo hay vez puede todos así nos ni parte tiene él "
        "uno donde bien tiempo mismo ese ahora cada vida otro después otros "
        "aunque esa eso hace otra gobierno tan durante siempre día tanto ella "
        "tres sí dijo sido gran país según menos año antes niño mañana"
    ),
    "it": (
        "Tutti gli esseri umani nascono liberi ed eguali in dignità e diritti. "
        "Essi sono dotati di ragione e di coscienza e devono agire gli uni "
        "verso gli altri in spirito di fratellanza. "
        "di e il la che in a per un è non del le si con da una i dei al sono ma "
        "come gli anche più alla lo ha della nel delle ci questo mi se o ne era "
        "quando lei tutto essere io cosa loro fatto già così perché molto tra "
        "sua suo ancora dopo fare poi nella stato questa solo tutti cui tempo "
        "può città però perciò sarà"
    ),
    "pt": (
        "Todos os seres humanos nascem livres e iguais em dignidade e em "
        "direitos. Dotados de razão e de consciência, devem agir uns para com "
        "os outros em espírito de fraternidade. "
        "de a o que e do da em um para é com não uma os no se na por mais as "
        "dos como mas foi ao ele das tem à seu sua ou ser quando muito há nos "
        "já está eu também só pelo pela até isso ela entre era depois sem mesmo "
        "aos ter seus quem nas me esse eles estão você tinha foram essa num nem "
        "suas meu às minha têm numa pelos elas havia seja qual será nós tenho "
        "lhe deles essas esses pelas este fosse dele não são então ações"
    ),
    "nl": (
        "Alle mensen worden vrij en gelijk in waardigheid en rechten geboren. "
        "Zij zijn begiftigd met verstand en geweten, en behoren zich jegens "
        "elkander in een geest van broederschap te gedragen. "
        "de en van ik te dat die in een hij het niet zijn is was op aan met als "
        "voor had er maar om hem dan zou of wat mijn men dit zo door over ze "
        "zich bij ook tot je mij uit der daar haar naar heb hoe heeft hebben "
        "deze want nog zal me zij nu geen omdat iets worden toch al waren veel "
        "meer doen toen moet ben zonder kan hun dus alles onder ja eens hier "
        "wie werd altijd wordt kunnen ons zelf tegen na reeds wil kon niets "
        "iemand geweest andere"
    ),
    "pl": (
        "Wszyscy ludzie rodzą się wolni i równi pod względem swej godności i "
        "swych praw. Są oni obdarzeni rozumem i sumieniem i powinni postępować "
        "wobec innych w duchu braterstwa. "
        "i w nie na się z do to że a o jak ale po co tak za jest od już tylko "
        "jego przez czy być może ich mnie jej są dla go by tego gdy pan teraz "
        "nawet był była było bardzo przy więc ten żeby tu ze jeszcze kiedy nic "
        "gdzie ona on my wszystko także który która które ja jeśli sobie lub "
        "dwa wiele można lat pod będzie źle mąż łąka część ręka książka"
    ),
    "cs": (
        "Všichni lidé rodí se svobodní a sobě rovní co do důstojnosti a práv. "
        "Jsou nadáni rozumem a svědomím a mají spolu jednat v duchu bratrství. "
        "a se na je že v to s z o do i ve jako ale by k pro za jsem jak po tak "
        "jsou už jeho které který když nebo bylo byl jen co od jsme mi si jej "
        "ho tom má být při však ještě tím než již podle bude jste mezi před "
        "protože také této tento jejich není můžeme řekl čas může věc díky "
        "řeka učitel město člověk žena dítě"
    ),
    "hu": (
        "Minden emberi lény szabadon születik és egyenlő méltósága és joga "
        "van. Az emberek, ésszel és lelkiismerettel bírván, egymással szemben "
        "testvéri szellemben kell hogy viseltessenek. "
        "a az és hogy nem is egy ez meg volt de csak már van mint még el ha "
        "kell sem fel azt ki vagy mert nagy jó lesz után minden így pedig "
        "között amely lehet azonban kérdés szerint újra első éves több ők "
        "őket itt ott mikor miért hol nélkül külön"
    ),
    "tr": (
        "Bütün insanlar hür, haysiyet ve haklar bakımından eşit doğarlar. Akıl "
        "ve vicdana sahiptirler ve birbirlerine karşı kardeşlik zihniyeti ile "
        "hareket etmelidirler. "
        "bir ve bu da de için ne ile o çok gibi daha ama en var ben sen mi "
        "kadar olarak olan değil sonra her şey diye ya bana beni onu benim "
        "şimdi iki büyük yok zaman nasıl oldu önce kendi ise hiç bütün göre "
        "çünkü bunu şu güzel işte değişik gün yıl"
    ),
    "ru": (
        "Все люди рождаются свободными и равными в своем достоинстве и правах. "
        "Они наделены разумом и совестью и должны поступать в отношении друг "
        "друга в духе братства. "
        "и в не на я что он с как а то все она так его но да ты к у же вы за "
        "бы по только ее мне было вот от меня еще нет о из ему теперь когда "
        "даже ну вдруг ли если уже или ни быть был него до вас опять уж вам "
        "ведь там потом себя ничего ей может они тут где есть надо ней для мы "
        "тебя их чем была сам чтоб без будто чего раз тоже себе под будет "
        "тогда кто этот того потому этого какой совсем ним здесь этом один "
        "почти мой тем чтобы нее сейчас были куда зачем всех никогда можно при "
        "наконец два об другой хоть после над больше тот через эти нас про"
    ),
    "uk": (
        "Всі люди народжуються вільними і рівними у своїй гідності та правах. "
        "Вони наділені розумом і совістю і повинні діяти у відношенні один до "
        "одного в дусі братерства. "
        "і в не на що з я та він це як до а у за але так його ти вона від ми "
        "то про все мене було вони же й її коли бо ще вже тільки по був йому "
        "може є тому якщо мені би чи ні ось де нас хто також їх для або цей "
        "ця дуже тепер після через своє своїх їхній європа ґанок пісня"
    ),
    "bg": (
        "Всички хора се раждат свободни и равни по достойнство и права. Те са "
        "надарени с разум и съвест и следва да се отнасят помежду си в дух на "
        "братство. "
        "и в на е да се не за с от че по са това ще към като но ли той тя те "
        "го ми му или при един една има беше бе така след само още вече "
        "всички когато там тук може трябва много във със също България "
        "държава къща път"
    ),
    "el": (
        "Όλοι οι άνθρωποι γεννιούνται ελεύθεροι και ίσοι στην αξιοπρέπεια και "
        "τα δικαιώματα. Είναι προικισμένοι με λογική και συνείδηση, και "
        "οφείλουν να συμπεριφέρονται μεταξύ τους με πνεύμα αδελφοσύνης. "
        "και το να του η της με για τα που στο δεν ο την από είναι θα στην "
        "οι των τον ένα μου σε αυτό αλλά όταν πολύ μας όπως έχει ήταν μια "
        "εδώ εκεί τώρα πρέπει μπορεί χρόνια"
    ),
    "he": (
        "כל בני האדם נולדו בני חורין ושווים בערכם ובזכויותיהם. כולם חוננו "
        "בתבונה ובמצפון, לפיכך חובה עליהם לנהוג איש ברעהו ברוח של אחוה. "
        "של את על לא זה הוא היא עם כל גם אבל אני אם או יש מה כי אשר בין הם "
        "היה לו עד רק אחד אחרי כך היום שלום ישראל עכשיו מאוד"
    ),
    "ar": (
        "يولد جميع الناس أحرارًا متساوين في الكرامة والحقوق. وقد وهبوا عقلاً "
        "وضميرًا وعليهم أن يعامل بعضهم بعضًا بروح الإخاء. "
        "في من على إلى أن هذا التي الذي مع كان عن ما لا هو هي كل بين قد ذلك "
        "بعد عند كما أو ثم حتى إن الله هذه يوم العالم العربية الدولة الناس "
        "أيضا كانت خلال"
    ),
    "th": (
        "มนุษย์ทั้งหลายเกิดมามีอิสระและเสมอภาคกันในเกียรติศักดิ์และสิทธิ "
        "ต่างมีเหตุผลและมโนธรรม และควรปฏิบัติต่อกันด้วยเจตนารมณ์แห่งภราดรภาพ "
        "และ ที่ ของ ใน เป็น การ มี ไม่ ได้ ว่า จะ ให้ กับ นี้ ความ แต่ ก็ คน "
        "มา ไป อยู่ เรา เขา ผม ทำ วัน ประเทศ ไทย เมื่อ จาก หรือ"
    ),
    "ja": (
        "すべての人間は、生まれながらにして自由であり、かつ、尊厳と権利とについ"
        "て平等である。人間は、理性と良心とを授けられており、互いに同胞の精神を"
        "もって行動しなければならない。"
        "これはテストです。日本語の文章を書いています。今日はとても良い天気で"
        "すね。私は東京に住んでいます。"
    ),
    "zh": (
        "人人生而自由，在尊严和权利上一律平等。他们赋有理性和良心，并应以兄弟关"
        "系的精神相对待。人人生而自由，在尊嚴和權利上一律平等。他們賦有理性和良"
        "心，並應以兄弟關係的精神相對待。"
    ),
    "ko": (
        "모든 인간은 태어날 때부터 자유로우며 그 존엄과 권리에 있어 동등하다. "
        "인간은 천부적으로 이성과 양심을 부여받았으며 서로 형제애의 정신으로 "
        "행동하여야 한다. "
        "이 그 저 것 수 등 들 및 에서 으로 하다 있다 되다 않다 없다 나 우리 "
        "한국 사람 대한 오늘 정말 감사합니다 안녕하세요"
    ),
}

#: Most frequent characters per CJK language, most frequent first.
FREQUENT_CHARACTERS: dict[str, str] = {
    "ja": (
        "ぁあぃいぅうぇえぉおかがきぎくぐけげこごさざしじすずせぜそぞただちぢっ"
        "つづてでとどなにぬねのはばぱひびぴふぶぷへべぺほぼぽまみむめもゃやゅゆ"
        "ょよらりるれろゎわゐゑをん"
        "ァアィイゥウェエォオカガキギクグケゲコゴサザシジスズセゼソゾタダチヂッ"
        "ツヅテデトドナニヌネノハバパヒビピフブプヘベペホボポマミムメモャヤュユ"
        "ョヨラリルレロヮワヰヱヲンヴー"
        "日一人年大十二本中長出三時行見月後前生五間上東四今金九入学高円子外八"
        "六下来気小七山話女北午百書先名川千水半男西電校語土木聞食車何南万毎白"
        "天母火右読友左休父雨会社自分事者国的業方新場員立開手力問代明動京目通"
        "言理体田主題意不作用度強公持野以思家世多正安院心界教文元重近考画海売"
        "知道集別物使品計死特私始朝運終台広住真有口少町料工建空急止送切転研足"
        "究楽起着店病質待試族銀早映親験英医仕去味写字答夜音注帰古歌買悪図週室"
        "歩風紙黒花春赤青館屋色走秋夏習駅洋旅服夕借曜飲肉貸堂鳥飯勉冬昼茶弟牛"
        "魚兄犬妹姉漢"
    ),
    "zh": (
        "的一是不了在人有我他这个们中来上大为和国地到以说时要就出会可也你对生"
        "能而子那得于着下自之年过发后作里用道行所然家种事成方多经么去法学如都"
        "同现当没动面起看定天分还进好小部其些主样理心她本前开但因只从想实日军"
        "者意无力它与长把机十民第公此已工使情明性知全三又关点正业外将两高间由"
        "问很最重并物手应战向头文体政美相见被利什二等产或新己制身果加西斯月话"
        "合回特代内信表化老给世位次度门任常先海通教儿原东声提立及比员解水名真"
        "论处走义各入几口认条平系气题活尔更别打女变四神总何电数安少报才结反受"
        "目太量再感建务做接必场件计管期市直德资命山金指克许统区保至队形社便空"
        "决治展马科司五基眼书非则听白却界达光放强即像难且权思王象完设式色路记"
        "南品住告类求据程北边死张该交规万取拉格望觉术领共确传师观清今切院让识"
        "候带导争运笑飞风步改收根干造言联持组每济车亲极林服快办议往元英士证近"
        "失转夫令准布始怎呢存未远叫台单影具罗字爱击流备兵连调深商算质团集百需"
        "价花党华城石级整府离况亚请技际约示复病息究线似官火断精满支视消越器容"
        "照须九增研写称企八功吗包片史委乎查轻易早曾除农找装广显吧阿李标谈吃图"
        "念六引历首医局突专费号尽另周较注语仅考落青随选列武红响虽推势参希古众"
        "這個們來為國說時會對過發後裡種經麼學現當沒動還進樣開從實軍無與長機"
        "關點業將兩間問應戰頭體產見話給東聲員論處義認條氣題爾變總電數報結"
        "務場計資區隊決將書難權記傳觀讓識帶導爭運風改聯組濟車親極辦議證轉"
        "準單影羅愛擊備連調團價黨華級離況亞請際約復線斷滿視歷醫專號較語"
    ),
    "ko": (
        "이다는의에가을고하지서를기한로어자리사도있수나대일국인게아시정것니그해"
        "들요만라과보우주제면여부마구전스내경상원위무물적으장방문동생성중소학"
        "간민가조세계실회오러및관때더회발계정치통신행결공화명연야말개월년법미"
        "음운안모선진영설데선화산었거금입반사업체유까력식된차교분업호람감했"
        "저후집날당열청각심점모든했다알운시작저희려두번왜통해며녀바로특서울"
    ),
}
